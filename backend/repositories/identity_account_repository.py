"""
Identity account repository.

Stages authentication identity rows on the same session as the domain
repositories so that registration commits both in one unit of work.
"""

import uuid
from typing import Optional
from sqlalchemy.orm import Session

from models import IdentityAccountRecord
from services.interfaces import IIdentityAccountStore
from utils.uuid_helper import parse_id
from .base_repository import BaseRepository


def normalize_email(email: str) -> str:
    """Normalized form used for the uniqueness check on identity accounts."""
    return email.strip().upper()


class IdentityAccountRepository(BaseRepository[IdentityAccountRecord], IIdentityAccountStore):
    """Repository for identity account records."""

    def __init__(self, db: Session):
        super().__init__(db, IdentityAccountRecord)

    def add(self, account_id: uuid.UUID, email: str) -> None:
        self._stage_add(IdentityAccountRecord(
            id=str(account_id),
            email=email,
            normalized_email=normalize_email(email),
        ))

    def find_id_by_email(self, email: str) -> Optional[uuid.UUID]:
        """
        Look up an account by email, ignoring case and surrounding whitespace.

        Returns:
            Account id or None if no account uses this email
        """
        record = self.db.query(self.model).filter(
            self.model.normalized_email == normalize_email(email)
        ).first()
        return parse_id(record.id) if record else None

    def delete(self, account_id: uuid.UUID) -> None:
        record = self._get_record(account_id)
        if record is not None:
            self._stage_delete(record)
