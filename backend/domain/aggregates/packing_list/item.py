"""
Item Entity

A single thing to pack. Items are children of a PackingList and are only
created, renamed, toggled and removed through the owning aggregate.
"""

import uuid

from domain.entities.base import Entity
from domain.exceptions import InvalidArgumentError
from utils.uuid_helper import generate_id


def _require_name(name: str) -> str:
    if name is None or not str(name).strip():
        raise InvalidArgumentError("name", "Item name cannot be null, empty or whitespace.")
    return name


class Item(Entity):
    """Packing list item with a name and a packed flag."""

    def __init__(self, id: uuid.UUID, name: str, is_packed: bool = False):
        super().__init__(id)
        self._name = name
        self._is_packed = is_packed

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_packed(self) -> bool:
        return self._is_packed

    @classmethod
    def create(cls, name: str) -> "Item":
        """
        Create a new, unpacked item.

        Raises:
            InvalidArgumentError: If name is None, empty or whitespace
        """
        return cls(generate_id(), _require_name(name), False)

    @classmethod
    def load(cls, id: uuid.UUID, name: str, is_packed: bool) -> "Item":
        """Rebuild a stored item; the name is validated as in create()."""
        return cls(id, _require_name(name), bool(is_packed))

    def change_name(self, name: str) -> None:
        self._name = _require_name(name)

    def mark_as_packed(self) -> None:
        self._is_packed = True

    def mark_as_unpacked(self) -> None:
        self._is_packed = False

    def __repr__(self) -> str:
        return f"Item(id={self.id}, name={self._name!r}, is_packed={self._is_packed})"
