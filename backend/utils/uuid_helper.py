"""
UUID helpers for the application.

Domain identifiers are uuid.UUID instances; the database stores them as
36-character strings.
"""
import uuid
from typing import Optional, Union

EMPTY_ID = uuid.UUID(int=0)


def generate_id() -> uuid.UUID:
    """
    Generate a new identifier.

    Returns:
        uuid.UUID: A new random (version 4) UUID
    """
    return uuid.uuid4()


def is_empty_id(value: Optional[uuid.UUID]) -> bool:
    """True for None and for the all-zero UUID."""
    return value is None or value == EMPTY_ID


def parse_id(value: Union[str, uuid.UUID]) -> uuid.UUID:
    """
    Coerce a stored or user-supplied identifier into a UUID.

    Raises:
        ValueError: If the string is not a valid UUID
    """
    if isinstance(value, uuid.UUID):
        return value
    return uuid.UUID(str(value))
