"""
Record stores for accounts and events.

Each store method opens its own SQLite connection, runs a single
statement and closes the connection again, so concurrent requests never
share a cursor.  Any ``sqlite3.Error`` other than the uniqueness
violation handled by ``UserStore.insert`` is re-raised as
``StoreUnavailable``.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from datetime import datetime
from typing import Optional

from .db import get_connection
from .errors import StoreUnavailable
from ..models import Event, EventStatus, Identity, Role


logger = logging.getLogger(__name__)


def _identity_from_row(row: sqlite3.Row) -> Identity:
    return Identity(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
    )


def _parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


def _event_from_row(row: sqlite3.Row) -> Event:
    return Event(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        source=row["source"],
        destination=row["destination"],
        owner_email=row["owner_email"],
        purpose=row["purpose"],
        start_date=_parse_timestamp(row["start_date"]),
        end_date=_parse_timestamp(row["end_date"]),
        status=EventStatus(row["status"]),
    )


class UserStore:
    """Persistence for ``Identity`` records."""

    @classmethod
    def find_by_email(cls, email: str) -> Optional[Identity]:
        """Return the account whose e-mail equals ``email`` exactly."""
        try:
            conn = get_connection()
            try:
                row = conn.execute(
                    "SELECT id, first_name, last_name, email, password_hash, role "
                    "FROM users WHERE email = ?",
                    (email,),
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise StoreUnavailable(str(exc)) from exc
        return _identity_from_row(row) if row else None

    @classmethod
    def insert(
        cls,
        first_name: str,
        last_name: str,
        email: str,
        password_hash: str,
        role: Role,
    ) -> Optional[Identity]:
        """Insert a new account unless the e-mail is already taken.

        Returns the stored account, or ``None`` when the unique e-mail
        constraint rejected the row.
        """
        try:
            conn = get_connection()
            try:
                cursor = conn.execute(
                    "INSERT INTO users (first_name, last_name, email, password_hash, role) "
                    "VALUES (?, ?, ?, ?, ?)",
                    (first_name, last_name, email, password_hash, role.value),
                )
                conn.commit()
                user_id = cursor.lastrowid
            except sqlite3.IntegrityError:
                conn.rollback()
                logger.debug("Insert rejected, e-mail %s already registered", email)
                return None
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise StoreUnavailable(str(exc)) from exc
        return Identity(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            password_hash=password_hash,
            role=role,
        )


class EventStore:
    """Persistence for ``Event`` records."""

    @classmethod
    def save(cls, event: Event) -> Event:
        """Insert ``event`` and return it with its new identifier."""
        try:
            conn = get_connection()
            try:
                cursor = conn.execute(
                    """
                    INSERT INTO events (name, description, source, destination, owner_email,
                                        purpose, start_date, end_date, status)
                    VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        event.name,
                        event.description,
                        event.source,
                        event.destination,
                        event.owner_email,
                        event.purpose,
                        event.start_date.isoformat() if event.start_date else None,
                        event.end_date.isoformat() if event.end_date else None,
                        event.status.value,
                    ),
                )
                conn.commit()
                event_id = cursor.lastrowid
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise StoreUnavailable(str(exc)) from exc
        return replace(event, id=event_id)

    @classmethod
    def get(cls, event_id: int) -> Optional[Event]:
        """Read one event back by id.  No route lists events; used for inspection."""
        try:
            conn = get_connection()
            try:
                row = conn.execute(
                    "SELECT id, name, description, source, destination, owner_email, "
                    "purpose, start_date, end_date, status FROM events WHERE id = ?",
                    (event_id,),
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise StoreUnavailable(str(exc)) from exc
        return _event_from_row(row) if row else None

    @classmethod
    def count(cls) -> int:
        """Number of stored events, for inspection."""
        try:
            conn = get_connection()
            try:
                row = conn.execute("SELECT COUNT(*) AS count FROM events").fetchone()
            finally:
                conn.close()
        except sqlite3.Error as exc:
            raise StoreUnavailable(str(exc)) from exc
        return row["count"]
