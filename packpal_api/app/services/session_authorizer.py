"""
Session binding and role checks.

``SessionAuthorizer`` is the capability check every protected action
goes through: is anyone logged in on this session, and does that
account hold a given role.  Roles are compared exactly; OWNER does not
imply ADMIN or any other role.
"""

import logging
from typing import Optional

from ..core.errors import ErrorKind, Result
from ..core.sessions import SessionStore, session_store
from ..models import Identity, Role


class SessionAuthorizer:
    """Binds accounts to session tokens and answers role checks."""

    store: SessionStore = session_store

    @classmethod
    def login(cls, token: str, identity: Identity) -> None:
        """Bind ``identity`` to ``token``, replacing any prior binding."""
        logger = logging.getLogger(__name__)
        cls.store.bind(token, identity)
        logger.info("Account %s logged in", identity.email)

    @classmethod
    def logout(cls, token: Optional[str]) -> None:
        if token:
            cls.store.unbind(token)

    @classmethod
    def current_identity(cls, token: Optional[str]) -> Optional[Identity]:
        if not token:
            return None
        return cls.store.lookup(token)

    @classmethod
    def require_role(cls, token: Optional[str], role: Role) -> Result[Identity]:
        identity = cls.current_identity(token)
        if identity is None:
            return Result.failure(ErrorKind.UNAUTHENTICATED)
        if identity.role is not role:
            return Result.failure(ErrorKind.FORBIDDEN)
        return Result.success(identity)
