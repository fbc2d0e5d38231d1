"""
User Response DTOs
"""

import uuid

from pydantic import BaseModel, Field

from domain.entities.user import User


class UserResponse(BaseModel):
    """
    Response DTO for user information.

    Exposes the email as a plain string rather than the Email value object.
    """

    id: uuid.UUID = Field(description="User ID")
    email: str = Field(description="Email address")

    class Config:
        """Pydantic configuration."""
        from_attributes = True

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(id=user.id, email=user.email.value)
