"""
Business logic for accounts.

``AccountService`` handles sign-up and credential checks.  It never
touches sessions; binding a logged-in account to a session is the job
of ``SessionAuthorizer``.  Passwords are stored as salted PBKDF2
hashes, never in plain text.
"""

import logging

from ..core.errors import ErrorKind, Result, StoreUnavailable
from ..core.security import hash_password, verify_password
from ..core.stores import UserStore
from ..models import Identity, Role


class AccountService:
    """Service for registering and authenticating accounts."""

    @classmethod
    async def signup(
        cls,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role_text: str,
    ) -> Result[Identity]:
        """Register a new account.

        Fails with ``DUPLICATE_EMAIL`` when the e-mail is taken (exact,
        case-sensitive match) and with ``INVALID_ROLE`` when
        ``role_text`` names none of the known roles.  The e-mail check
        runs first, so a taken e-mail is reported whatever the role.
        Signing up does not log the account in.
        """
        logger = logging.getLogger(__name__)
        try:
            if UserStore.find_by_email(email) is not None:
                logger.info("Sign-up rejected, %s already registered", email)
                return Result.failure(ErrorKind.DUPLICATE_EMAIL)

            role = Role.parse(role_text)
            if role is None:
                logger.info("Sign-up rejected, unknown role %r", role_text)
                return Result.failure(ErrorKind.INVALID_ROLE)

            identity = UserStore.insert(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=hash_password(password),
                role=role,
            )
        except StoreUnavailable:
            logger.exception("User store unavailable during sign-up")
            return Result.failure(ErrorKind.STORE_UNAVAILABLE)

        # A concurrent sign-up may have claimed the e-mail between lookup and insert.
        if identity is None:
            return Result.failure(ErrorKind.DUPLICATE_EMAIL)
        logger.info("Registered account %s with role %s", email, role.value)
        return Result.success(identity)

    @classmethod
    async def authenticate(cls, email: str, password: str) -> Result[Identity]:
        """Check credentials and return the matching account.

        ``NOT_FOUND`` when no account has this e-mail, ``BAD_CREDENTIAL``
        when the password does not match.
        """
        logger = logging.getLogger(__name__)
        try:
            identity = UserStore.find_by_email(email)
        except StoreUnavailable:
            logger.exception("User store unavailable during login")
            return Result.failure(ErrorKind.STORE_UNAVAILABLE)
        if identity is None:
            return Result.failure(ErrorKind.NOT_FOUND)
        if not verify_password(password, identity.password_hash):
            logger.info("Wrong password for %s", email)
            return Result.failure(ErrorKind.BAD_CREDENTIAL)
        return Result.success(identity)
