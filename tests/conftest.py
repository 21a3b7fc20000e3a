"""Shared fixtures: a throw-away SQLite database and a clean session store per test."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from packpal_api.app.core.config import settings
from packpal_api.app.core.db import init_db
from packpal_api.app.core.sessions import session_store
from packpal_api.app.main import create_app


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the stores at a fresh database file with the schema applied."""
    db_file = tmp_path / "packpal-test.db"
    monkeypatch.setattr(settings, "database_url", str(db_file))
    # Keep hashing cheap in tests.
    monkeypatch.setattr(settings, "password_hash_iterations", 1_000)
    init_db()
    yield db_file


@pytest.fixture(autouse=True)
def clear_sessions():
    session_store.clear()
    yield
    session_store.clear()


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client

