"""
Conversions between ORM records and domain objects.

Every function here is pure: it reads one side and builds the other without
touching the session.
"""

from typing import List

from domain.aggregates.packing_list import Item, PackingList
from domain.entities.user import User
from models import ItemRecord, PackingListRecord, UserRecord
from utils.uuid_helper import parse_id


def user_to_domain(record: UserRecord) -> User:
    return User.load(parse_id(record.id), record.email)


def user_from_domain(user: User) -> UserRecord:
    return UserRecord(id=str(user.id), email=user.email.value)


def item_to_domain(record: ItemRecord) -> Item:
    return Item.load(parse_id(record.id), record.name or "", bool(record.is_packed))


def item_from_domain(item: Item) -> ItemRecord:
    """Build an item row; packing_list_id is set when it is attached to its list."""
    return ItemRecord(id=str(item.id), name=item.name, is_packed=item.is_packed)


def packing_list_to_domain(record: PackingListRecord) -> PackingList:
    items: List[Item] = [item_to_domain(row) for row in record.items or []]
    return PackingList.load(
        parse_id(record.id),
        record.name if record.name is not None else "",
        parse_id(record.user_id),
        items,
    )


def packing_list_from_domain(packing_list: PackingList) -> PackingListRecord:
    return PackingListRecord(
        id=str(packing_list.id),
        name=packing_list.name,
        user_id=str(packing_list.owner_id),
        items=[item_from_domain(item) for item in packing_list.items],
    )
