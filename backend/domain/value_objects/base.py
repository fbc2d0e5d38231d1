"""
ValueObject Base

Value objects have no identity. Equality and hashing derive from the ordered
sequence of their equality components.
"""

from abc import ABC, abstractmethod
from functools import reduce
from typing import Any, Iterable


class ValueObject(ABC):
    """Base class for immutable, structurally compared types."""

    @abstractmethod
    def _equality_components(self) -> Iterable[Any]:
        """Yield the fields that define equality, in a fixed order."""

    def __eq__(self, other: object) -> bool:
        if other is None or type(self) is not type(other):
            return False
        return list(self._equality_components()) == list(other._equality_components())

    def __hash__(self) -> int:
        return reduce(
            lambda current, component: current * 23 + (0 if component is None else hash(component)),
            self._equality_components(),
            1,
        )
