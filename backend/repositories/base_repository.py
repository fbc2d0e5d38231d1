"""
Base repository providing common record access.
"""

import uuid
from typing import Generic, TypeVar, List, Optional, Type
from sqlalchemy.orm import Session

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Generic base repository over one ORM record type.

    Methods here only stage work on the session. Nothing is committed; the
    unit of work sharing the same session owns the commit.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session shared with the unit of work
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    def _get_record(self, id: uuid.UUID) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Domain identifier

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == str(id)).first()

    def _get_all_records(self) -> List[T]:
        return self.db.query(self.model).all()

    def _stage_add(self, record: T) -> T:
        self.db.add(record)
        return record

    def _stage_delete(self, record: T) -> None:
        self.db.delete(record)

    def count(self) -> int:
        """
        Count total records.

        Returns:
            Total number of records
        """
        return self.db.query(self.model).count()

    def exists(self, id: uuid.UUID) -> bool:
        """
        Check if a record exists by ID.

        Args:
            id: Domain identifier

        Returns:
            True if exists, False otherwise
        """
        return self.db.query(self.model).filter(self.model.id == str(id)).count() > 0
