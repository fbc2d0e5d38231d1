"""
Email Value Object

Immutable, validated email address. The raw string is kept verbatim: no
trimming, no case folding.
"""

import re
from dataclasses import dataclass
from typing import Iterable

from domain.exceptions import EmptyEmailError, InvalidEmailError
from domain.value_objects.base import ValueObject

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True, eq=False)
class Email(ValueObject):
    """
    Email address value object.

    Raises:
        EmptyEmailError: If the value is None, empty or whitespace
        InvalidEmailError: If the value is not shaped like local@domain.tld
    """

    value: str

    def __post_init__(self):
        if self.value is None or not str(self.value).strip():
            raise EmptyEmailError()
        if not isinstance(self.value, str) or not EMAIL_PATTERN.fullmatch(self.value):
            raise InvalidEmailError(self.value)

    def _equality_components(self) -> Iterable[str]:
        yield self.value

    def __str__(self) -> str:
        return self.value
