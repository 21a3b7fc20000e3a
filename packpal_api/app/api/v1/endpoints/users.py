"""
Account endpoints for logged-in users.
"""

from fastapi import APIRouter, Depends

from packpal_api.app.core.security import require_login
from packpal_api.app.models import Identity
from packpal_api.app.schemas.user import UserRead


router = APIRouter()


@router.get("/me", response_model=UserRead)
async def read_current_user(current_user: Identity = Depends(require_login)) -> UserRead:
    """Return the account bound to the current session."""
    return UserRead.from_identity(current_user)
