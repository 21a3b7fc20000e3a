"""
Top-level package for the PackPal API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
