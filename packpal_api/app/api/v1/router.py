"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  Only ``/auth`` is public.
``/event`` answers a missing session with its own message, so it checks
the session inside the endpoint; every other router, the API docs
included, is mounted behind ``require_login``.
"""

from fastapi import APIRouter, Depends

from packpal_api.app.core.security import require_login
from .endpoints import auth, docs, events, users


router = APIRouter()

login_required = [Depends(require_login)]

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(events.router, prefix="/event", tags=["events"])
router.include_router(users.router, prefix="/user", tags=["users"], dependencies=login_required)
router.include_router(docs.router, dependencies=login_required)
