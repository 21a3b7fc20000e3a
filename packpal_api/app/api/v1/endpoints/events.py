"""
Event endpoints.

Event creation checks the session itself rather than relying on the
generic ``require_login`` guard so that it can answer with its own
messages for a missing session and for a non-OWNER account.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from packpal_api.app.api.v1.responses import failure_response
from packpal_api.app.core.errors import ErrorKind
from packpal_api.app.core.security import get_session_token
from packpal_api.app.schemas.event import EventCreate
from packpal_api.app.services.event_service import EventService


router = APIRouter()

CREATE_MESSAGES = {
    ErrorKind.UNAUTHENTICATED: "You must be logged in to create an event.",
    ErrorKind.FORBIDDEN: "Access denied: Only users with OWNER role can create events.",
}


@router.post("/create", response_class=PlainTextResponse)
async def create_event(
    event: EventCreate,
    token: Optional[str] = Depends(get_session_token),
) -> PlainTextResponse:
    """Create a new event owned by the logged-in OWNER account."""
    result = await EventService.create_event(token, event)
    if not result.ok:
        return failure_response(result.error, CREATE_MESSAGES)
    return PlainTextResponse("Event created successfully.")
