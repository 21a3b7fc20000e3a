"""
Authentication endpoints.

Sign-up, login and logout are the only routes reachable without a
session.  Login issues a fresh session token in a cookie; any token the
client already carried is discarded first so a pre-login token can
never become an authenticated one.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Form
from fastapi.responses import PlainTextResponse

from packpal_api.app.api.v1.responses import failure_response
from packpal_api.app.core.config import settings
from packpal_api.app.core.errors import ErrorKind
from packpal_api.app.core.security import get_session_token
from packpal_api.app.core.sessions import new_session_token
from packpal_api.app.models import Role
from packpal_api.app.services.account_service import AccountService
from packpal_api.app.services.session_authorizer import SessionAuthorizer


router = APIRouter()

SIGNUP_MESSAGES = {
    ErrorKind.DUPLICATE_EMAIL: "Email is already registered",
    ErrorKind.INVALID_ROLE: f"Invalid role. Allowed roles are: {Role.allowed()}",
}

LOGIN_MESSAGES = {
    ErrorKind.NOT_FOUND: "user not found",
    ErrorKind.BAD_CREDENTIAL: "Invalid password",
}


@router.post("/signup", response_class=PlainTextResponse)
async def signup(
    fName: str = Form(...),
    lName: str = Form(...),
    email: str = Form(...),
    password: str = Form(...),
    role: str = Form(...),
) -> PlainTextResponse:
    """Register a new account.  Does not log the account in."""
    result = await AccountService.signup(fName, lName, email, password, role)
    if not result.ok:
        return failure_response(result.error, SIGNUP_MESSAGES)
    return PlainTextResponse("Signup successful")


@router.post("/login", response_class=PlainTextResponse)
async def login(
    username: str = Form(...),
    password: str = Form(...),
    token: Optional[str] = Depends(get_session_token),
) -> PlainTextResponse:
    """Check credentials and bind the account to a new session."""
    result = await AccountService.authenticate(username, password)
    if not result.ok:
        return failure_response(result.error, LOGIN_MESSAGES)

    SessionAuthorizer.logout(token)
    new_token = new_session_token()
    SessionAuthorizer.login(new_token, result.value)

    response = PlainTextResponse("login success")
    response.set_cookie(
        settings.session_cookie_name,
        new_token,
        httponly=True,
        samesite="lax",
    )
    return response


@router.post("/logout", response_class=PlainTextResponse)
async def logout(token: Optional[str] = Depends(get_session_token)) -> PlainTextResponse:
    """End the current session.  Safe to call when not logged in."""
    SessionAuthorizer.logout(token)
    response = PlainTextResponse("Logged out successfully.")
    response.delete_cookie(settings.session_cookie_name)
    return response
