import uuid

import pytest

from domain.aggregates.packing_list import Item, PackingList
from domain.entities.base import Entity
from domain.entities.user import User
from domain.value_objects.base import ValueObject


class Money(ValueObject):
    def __init__(self, amount, currency):
        self.amount = amount
        self.currency = currency

    def _equality_components(self):
        yield self.amount
        yield self.currency


class Swapped(ValueObject):
    def __init__(self, amount, currency):
        self.amount = amount
        self.currency = currency

    def _equality_components(self):
        yield self.currency
        yield self.amount


def test_entities_with_same_id_and_type_are_equal():
    shared_id = uuid.uuid4()
    first = Item(shared_id, "Socks")
    second = Item(shared_id, "Different name", True)

    assert first == second
    assert hash(first) == hash(second)


def test_entities_with_different_ids_differ():
    assert Item(uuid.uuid4(), "Socks") != Item(uuid.uuid4(), "Socks")


def test_entities_of_different_types_with_same_id_differ():
    shared_id = uuid.uuid4()
    item = Item(shared_id, "Socks")
    packing_list = PackingList(shared_id, "Trip", uuid.uuid4(), [])

    assert item != packing_list


def test_entity_is_not_equal_to_non_entity():
    user = User.create("a@b.c")
    assert user != user.id
    assert user != None  # noqa: E711


def test_entity_hash_depends_only_on_id():
    user = User.create("a@b.c")
    before = hash(user)
    user.change_email("other@b.c")
    assert hash(user) == before == hash(user.id)


def test_entity_id_is_read_only():
    entity = Entity(uuid.uuid4())
    with pytest.raises(AttributeError):
        entity.id = uuid.uuid4()


def test_value_objects_compare_components_in_order():
    assert Money(10, "EUR") == Money(10, "EUR")
    assert hash(Money(10, "EUR")) == hash(Money(10, "EUR"))
    assert Money(10, "EUR") != Money(10, "USD")


def test_value_objects_of_different_types_differ():
    assert Money(10, "EUR") != Swapped(10, "EUR")


def test_value_object_hash_is_order_sensitive():
    assert hash(Money("a", "b")) != hash(Money("b", "a"))


def test_value_object_hash_handles_none_component():
    assert hash(Money(None, "EUR")) == hash(Money(None, "EUR"))
