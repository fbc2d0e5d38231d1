"""
User Request DTOs

DTOs for user-related requests. Email shape is checked by the domain Email
value object, not here.
"""

import uuid

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request DTO for creating a user."""

    email: str = Field(description="Email address of the new user")


class UpdateUserRequest(BaseModel):
    """Request DTO for changing a user's email."""

    id: uuid.UUID = Field(description="User ID")
    email: str = Field(description="New email address")


class RegisterUserRequest(BaseModel):
    """Request DTO for registering an identity account together with its user."""

    email: str = Field(description="Email address to register")
