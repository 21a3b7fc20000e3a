"""
Application package initializer.

The project is organised into ``core`` (configuration, database,
stores, sessions, security), ``services`` (account, session and event
logic), ``schemas`` (API payloads) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
