"""
Security helpers for password hashing and session-based access control.

Passwords are hashed with PBKDF2-HMAC-SHA256 using a random 16-byte
salt per password.  The stored string records the iteration count,
salt and digest so the iteration setting can be raised later without
invalidating existing accounts.  Digests are compared in constant time.

The FastAPI dependencies at the bottom read the opaque session token
from the session cookie and resolve it through ``SessionAuthorizer``.
"""

import hashlib
import hmac
import logging
import os
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from .config import settings
from ..models import Identity
from ..services.session_authorizer import SessionAuthorizer


logger = logging.getLogger(__name__)


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    Returns ``"<iterations>$<salt hex>$<digest hex>"``.
    """
    iterations = iterations or settings.password_hash_iterations
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{iterations}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored hash string.

    Malformed stored values never match.
    """
    try:
        iterations_text, salt_hex, hash_hex = hashed_password.split("$", 2)
        iterations = int(iterations_text)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
        # pbkdf2_hmac rejects a non-positive iteration count with ValueError
        dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, iterations)
    except ValueError:
        logger.warning("Stored password hash has an unexpected format")
        return False
    return hmac.compare_digest(dk, stored_hash)


def get_session_token(request: Request) -> Optional[str]:
    """Return the session token carried by the request, if any."""
    return request.cookies.get(settings.session_cookie_name)


def get_current_identity(token: Optional[str] = Depends(get_session_token)) -> Optional[Identity]:
    """Dependency resolving the bound account, or ``None`` when logged out."""
    return SessionAuthorizer.current_identity(token)


def require_login(identity: Optional[Identity] = Depends(get_current_identity)) -> Identity:
    """Dependency guarding every route outside ``/auth``.

    Raises HTTP 401 when the request carries no live session.
    """
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required.",
        )
    return identity
