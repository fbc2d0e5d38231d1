"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- Email: Validated email address owned by a User
"""

from .base import ValueObject
from .email import Email

__all__ = ["ValueObject", "Email"]
