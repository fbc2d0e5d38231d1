"""
Repository layer for data access abstraction.

This package contains repository classes that map domain aggregates onto
ORM records, plus the unit of work that commits their staged changes.
"""

from .base_repository import BaseRepository
from .user_repository import UserRepository
from .packing_list_repository import PackingListRepository
from .identity_account_repository import IdentityAccountRepository
from .unit_of_work import SqlAlchemyUnitOfWork

__all__ = [
    "BaseRepository",
    "UserRepository",
    "PackingListRepository",
    "IdentityAccountRepository",
    "SqlAlchemyUnitOfWork",
]
