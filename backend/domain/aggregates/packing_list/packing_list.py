"""
PackingList Aggregate Root

Owns a collection of Items. Every structural change to the items goes
through this class; callers never hold a mutable handle on the collection.

Invariants:
- name is never None (create() additionally rejects empty/whitespace)
- owner_id is never None or the empty UUID
- item ids are unique within the list
"""

import uuid
from typing import Iterable, Optional, Tuple

from domain.aggregates.packing_list.item import Item
from domain.entities.base import Entity
from domain.exceptions import InvalidArgumentError
from utils.uuid_helper import generate_id, is_empty_id


class PackingList(Entity):
    """
    Aggregate root for a user's packing list.

    owner_id is a plain reference to a User id; the list does not own the user.
    """

    def __init__(self, id: uuid.UUID, name: str, owner_id: uuid.UUID, items: Iterable[Item]):
        super().__init__(id)
        self._name = name
        self._owner_id = owner_id
        self._items = list(items)

    @property
    def name(self) -> str:
        return self._name

    @property
    def owner_id(self) -> uuid.UUID:
        return self._owner_id

    @property
    def items(self) -> Tuple[Item, ...]:
        """Snapshot of the current items; order is not significant."""
        return tuple(self._items)

    @classmethod
    def create(cls, name: str, owner_id: uuid.UUID) -> "PackingList":
        """
        Create an empty packing list with a fresh id.

        Raises:
            InvalidArgumentError: If name is None/empty/whitespace or owner_id is empty
        """
        if name is None or not str(name).strip():
            raise InvalidArgumentError("name", "Packing list name cannot be null, empty or whitespace.")
        if is_empty_id(owner_id):
            raise InvalidArgumentError("owner_id", "Packing list owner id cannot be empty.")
        return cls(generate_id(), name, owner_id, [])

    @classmethod
    def load(
        cls,
        id: uuid.UUID,
        name: str,
        owner_id: uuid.UUID,
        items: Iterable[Item],
    ) -> "PackingList":
        """
        Rebuild a stored packing list.

        Nothing is validated here: the caller is the persistence layer and
        hands over rows that were valid when written.
        """
        return cls(id, name, owner_id, items)

    def change_name(self, name: str) -> None:
        """
        Rename the list.

        Only None is rejected; an empty string is accepted here even though
        create() refuses it.
        """
        if name is None:
            raise InvalidArgumentError("name")
        self._name = name

    def add_item(self, name: str) -> Item:
        """
        Append a new unpacked item and return it.

        Raises:
            InvalidArgumentError: If name is None, empty or whitespace
        """
        item = Item.create(name)
        self._items.append(item)
        return item

    def remove_item(self, item_id: uuid.UUID) -> None:
        item = self._find_item(item_id)
        if item is not None:
            self._items.remove(item)

    def change_item_name(self, item_id: uuid.UUID, name: str) -> None:
        item = self._find_item(item_id)
        if item is not None:
            item.change_name(name)

    def mark_item_as_packed(self, item_id: uuid.UUID) -> None:
        item = self._find_item(item_id)
        if item is not None:
            item.mark_as_packed()

    def mark_item_as_unpacked(self, item_id: uuid.UUID) -> None:
        item = self._find_item(item_id)
        if item is not None:
            item.mark_as_unpacked()

    def _find_item(self, item_id: uuid.UUID) -> Optional[Item]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None
