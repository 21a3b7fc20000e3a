"""
Outcome types shared by the service layer.

Services never raise for expected failures such as a duplicate e-mail
or a missing session.  They return a ``Result`` carrying either the
value or an ``ErrorKind``; the HTTP layer turns the kind into a status
code and message.  ``StoreUnavailable`` is the one exception in the
system: stores raise it when the database cannot be reached and the
services convert it into a ``STORE_UNAVAILABLE`` result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Failure kinds produced by the services."""

    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_ROLE = "INVALID_ROLE"
    NOT_FOUND = "NOT_FOUND"
    BAD_CREDENTIAL = "BAD_CREDENTIAL"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


class StoreUnavailable(Exception):
    """Raised by a record store when the database cannot serve a request."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an error kind, never both."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None
