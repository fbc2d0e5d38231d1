"""
Packing List Request DTOs
"""

import uuid

from pydantic import BaseModel, Field


class CreatePackingListRequest(BaseModel):
    """Request DTO for creating an empty packing list."""

    name: str = Field(description="Packing list name")
    owner_id: uuid.UUID = Field(description="ID of the owning user")
