"""
Domain Entities

Entities are business objects with identity and lifecycle.
They are mutable and have a unique identifier that persists through their lifetime.

Examples:
- User entity: A registered person identified by id, carrying an Email
"""

from .base import Entity
from .user import User

__all__ = ["Entity", "User"]
