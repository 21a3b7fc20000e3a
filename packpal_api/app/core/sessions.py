"""
In-process session store.

Maps opaque session tokens to the account bound to them.  The store is
the only owner of session state: callers hand in a token and get back
an immutable ``Identity`` snapshot, never a shared mutable object.

Two policies live here:

* a per-account cap (``max_sessions_per_identity``).  Binding a token
  to an account that already holds the maximum number of sessions
  evicts that account's oldest sessions;
* idle expiry.  A token not used for ``idle_seconds`` reads as unbound
  and is dropped, either when it is looked up or on the next ``bind``
  of any token.

All access goes through a single lock, so a completed ``bind`` is
visible to every later ``lookup`` of the same token.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .config import settings
from ..models import Identity


logger = logging.getLogger(__name__)


def new_session_token() -> str:
    """Generate a fresh, unguessable session token."""
    return secrets.token_urlsafe(32)


@dataclass
class _Binding:
    identity: Identity
    last_seen: float


class SessionStore:
    """Thread-safe token → identity mapping."""

    def __init__(
        self,
        idle_seconds: float,
        max_sessions_per_identity: int = 1,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._idle_seconds = idle_seconds
        self._max_sessions = max(1, max_sessions_per_identity)
        self._clock = clock
        self._lock = threading.Lock()
        self._bindings: Dict[str, _Binding] = {}
        # identity id -> tokens, oldest first
        self._tokens_by_identity: Dict[int, List[str]] = {}

    def bind(self, token: str, identity: Identity) -> None:
        """Bind ``identity`` to ``token``, replacing any previous binding."""
        with self._lock:
            now = self._clock()
            self._sweep(now)
            self._remove(token)
            self._bindings[token] = _Binding(identity=identity, last_seen=now)
            tokens = self._tokens_by_identity.setdefault(identity.id, [])
            tokens.append(token)
            while len(tokens) > self._max_sessions:
                evicted = tokens.pop(0)
                self._bindings.pop(evicted, None)
                logger.info("Evicted older session of account %s", identity.email)

    def unbind(self, token: str) -> None:
        with self._lock:
            self._remove(token)

    def lookup(self, token: str) -> Optional[Identity]:
        """Return the identity bound to ``token``, refreshing its idle timer."""
        with self._lock:
            binding = self._bindings.get(token)
            if binding is None:
                return None
            now = self._clock()
            if now - binding.last_seen > self._idle_seconds:
                logger.info("Session of account %s expired", binding.identity.email)
                self._remove(token)
                return None
            binding.last_seen = now
            return binding.identity

    def tokens_for(self, identity_id: int) -> List[str]:
        """Live tokens of an account, oldest first.  Read-only, for inspection."""
        with self._lock:
            return list(self._tokens_by_identity.get(identity_id, []))

    def clear(self) -> None:
        with self._lock:
            self._bindings.clear()
            self._tokens_by_identity.clear()

    def _sweep(self, now: float) -> None:
        # Caller holds the lock.
        expired = [
            token for token, binding in self._bindings.items()
            if now - binding.last_seen > self._idle_seconds
        ]
        for token in expired:
            self._remove(token)
        if expired:
            logger.debug("Dropped %d idle sessions", len(expired))

    def _remove(self, token: str) -> None:
        # Caller holds the lock.
        binding = self._bindings.pop(token, None)
        if binding is None:
            return
        tokens = self._tokens_by_identity.get(binding.identity.id, [])
        if token in tokens:
            tokens.remove(token)
        if not tokens:
            self._tokens_by_identity.pop(binding.identity.id, None)


session_store = SessionStore(
    idle_seconds=settings.session_idle_minutes * 60,
    max_sessions_per_identity=settings.max_sessions_per_identity,
)
