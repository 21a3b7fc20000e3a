"""
Pydantic models for account data.

Sign-up and login arrive as form fields, so only the read model is
declared here.  The password hash is never part of a response.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..models import Identity, Role


class UserRead(BaseModel):
    """Schema for reading the logged-in account."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(..., alias="fName", examples=["Asha"])
    last_name: str = Field(..., alias="lName", examples=["Patil"])
    email: str = Field(..., examples=["asha@example.com"])
    role: Role

    @classmethod
    def from_identity(cls, identity: Identity) -> "UserRead":
        return cls(
            id=identity.id,
            first_name=identity.first_name,
            last_name=identity.last_name,
            email=identity.email,
            role=identity.role,
        )
