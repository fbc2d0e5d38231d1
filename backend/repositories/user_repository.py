"""
User repository mapping User aggregates onto the domain_users table.
"""

import logging
import uuid
from typing import List, Optional
from sqlalchemy.orm import Session

from domain.entities.user import User
from domain.repositories import IUserRepository
from models import UserRecord
from .base_repository import BaseRepository
from .mappers import user_from_domain, user_to_domain

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[UserRecord], IUserRepository):
    """Repository for User aggregates."""

    def __init__(self, db: Session):
        super().__init__(db, UserRecord)

    def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """
        Load a user.

        Returns:
            User, or None if no row has this id
        """
        record = self._get_record(user_id)
        return user_to_domain(record) if record else None

    def get_all(self) -> List[User]:
        return [user_to_domain(record) for record in self._get_all_records()]

    def add(self, user: User) -> None:
        self._stage_add(user_from_domain(user))

    def update(self, user: User) -> None:
        record = self._get_record(user.id)
        if record is None:
            logger.debug(f"Update skipped, user {user.id} is not stored")
            return
        record.email = user.email.value

    def delete(self, user_id: uuid.UUID) -> None:
        record = self._get_record(user_id)
        if record is not None:
            self._stage_delete(record)
