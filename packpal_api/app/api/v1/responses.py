"""
Translation of service failures into HTTP responses.

Every endpoint answers with a short plain-text message.  Status codes
are shared by all endpoints; the message text is chosen per endpoint
because the same failure kind reads differently depending on the
action (e.g. "user not found" at login).
"""

from typing import Dict

from fastapi import status
from fastapi.responses import PlainTextResponse

from packpal_api.app.core.errors import ErrorKind


STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_ROLE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.BAD_CREDENTIAL: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}

STORE_UNAVAILABLE_MESSAGE = "Service temporarily unavailable."


def failure_response(error: ErrorKind, messages: Dict[ErrorKind, str]) -> PlainTextResponse:
    """Build the response for ``error`` using the endpoint's ``messages``."""
    message = messages.get(error, STORE_UNAVAILABLE_MESSAGE)
    return PlainTextResponse(message, status_code=STATUS_CODES[error])
