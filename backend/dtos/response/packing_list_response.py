"""
Packing List Response DTOs
"""

import uuid
from typing import List

from pydantic import BaseModel, Field

from domain.aggregates.packing_list import Item, PackingList


class ItemResponse(BaseModel):
    """Response DTO for a single packing list item."""

    id: uuid.UUID = Field(description="Item ID")
    name: str = Field(description="Item name")
    is_packed: bool = Field(description="Whether the item is packed")

    class Config:
        """Pydantic configuration."""
        from_attributes = True

    @classmethod
    def from_domain(cls, item: Item) -> "ItemResponse":
        return cls(id=item.id, name=item.name, is_packed=item.is_packed)


class PackingListResponse(BaseModel):
    """
    Response DTO for a packing list and its items.

    Includes packed/total counts for display.
    """

    id: uuid.UUID = Field(description="Packing list ID")
    name: str = Field(description="Packing list name")
    owner_id: uuid.UUID = Field(description="ID of the owning user")
    items: List[ItemResponse] = Field(default_factory=list, description="Items on the list")
    packed_count: int = Field(0, description="Number of packed items")
    item_count: int = Field(0, description="Total number of items")

    class Config:
        """Pydantic configuration."""
        from_attributes = True

    @classmethod
    def from_domain(cls, packing_list: PackingList) -> "PackingListResponse":
        items = [ItemResponse.from_domain(item) for item in packing_list.items]
        return cls(
            id=packing_list.id,
            name=packing_list.name,
            owner_id=packing_list.owner_id,
            items=items,
            packed_count=sum(1 for item in items if item.is_packed),
            item_count=len(items),
        )
