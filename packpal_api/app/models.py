"""
Domain models representing persisted state.

These are plain immutable objects handed between stores, services and
the session store.  API payloads live in ``schemas``; table layouts
live in ``core.db``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Account roles.  There is no hierarchy between them."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"
    VIEWER = "VIEWER"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Role"]:
        """Return the role named by ``text`` (any case), or ``None``."""
        if text is None:
            return None
        return cls.__members__.get(text.upper())

    @classmethod
    def allowed(cls) -> str:
        return ", ".join(role.value for role in cls)


class EventStatus(str, Enum):
    ONGOING = "ONGOING"
    ENDED = "ENDED"


@dataclass(frozen=True)
class Identity:
    """A registered account."""

    id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: Role


@dataclass(frozen=True)
class Event:
    """A persisted event.  ``id`` is ``None`` until the store saves it."""

    id: Optional[int]
    name: Optional[str]
    description: Optional[str]
    source: Optional[str]
    destination: Optional[str]
    owner_email: str
    purpose: Optional[str]
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    status: EventStatus
