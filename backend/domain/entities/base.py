"""
Entity Base

Entities are compared by identity: two entities are equal when they are of
the same concrete type and carry the same id, whatever their other fields.
"""

import uuid


class Entity:
    """
    Base class for all entities.

    The id is fixed at construction and never changes afterwards.
    """

    def __init__(self, id: uuid.UUID):
        self._id = id

    @property
    def id(self) -> uuid.UUID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        if self is other:
            return True
        if type(self) is not type(other):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id})"
