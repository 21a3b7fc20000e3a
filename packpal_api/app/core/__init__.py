"""
Infrastructure shared by the services: settings, logging, the SQLite
database and record stores, the session store and password hashing.
"""
