"""
Business logic for events.

Only accounts holding the OWNER role may create events.  The owner
e-mail and the initial status are always set here; whatever the client
sent for those fields is discarded.
"""

import logging
from typing import Optional

from ..core.errors import ErrorKind, Result, StoreUnavailable
from ..core.stores import EventStore
from ..models import Event, EventStatus, Role
from ..schemas.event import EventCreate
from .session_authorizer import SessionAuthorizer


class EventService:
    """Service for creating events."""

    @classmethod
    async def create_event(cls, token: Optional[str], data: EventCreate) -> Result[Event]:
        """Create an event on behalf of the account logged in on ``token``.

        Authorization failures (``UNAUTHENTICATED``, ``FORBIDDEN``) are
        returned unchanged and nothing is stored.
        """
        logger = logging.getLogger(__name__)
        principal = SessionAuthorizer.require_role(token, Role.OWNER)
        if not principal.ok:
            logger.info("Event creation refused: %s", principal.error.value)
            return Result.failure(principal.error)

        owner = principal.value
        event = Event(
            id=None,
            name=data.name,
            description=data.description,
            source=data.source,
            destination=data.destination,
            owner_email=owner.email,
            purpose=data.purpose,
            start_date=data.start_date,
            end_date=data.end_date,
            status=EventStatus.ONGOING,
        )
        try:
            saved = EventStore.save(event)
        except StoreUnavailable:
            logger.exception("Event store unavailable")
            return Result.failure(ErrorKind.STORE_UNAVAILABLE)
        logger.info("Account %s created event %s '%s'", owner.email, saved.id, saved.name)
        return Result.success(saved)
