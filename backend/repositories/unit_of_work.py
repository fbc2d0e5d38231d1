"""
SQLAlchemy unit of work.

Repositories built on the same Session stage their changes; commit()
finalizes all of them together or none of them.
"""

import logging
from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from exceptions import PersistenceError
from services.interfaces import IUnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(IUnitOfWork):
    """
    Commit/rollback boundary over one Session.

    Scoped to a single use case: create it with the session the use case's
    repositories share and discard it afterwards.
    """

    def __init__(self, db: Session):
        """
        Initialize the unit of work.

        Args:
            db: Session shared with the repositories of this use case
        """
        self.db = db
        self._affected_rows = 0
        event.listen(self.db, "after_flush", self._count_flushed_rows)

    def _count_flushed_rows(self, session: Session, flush_context) -> None:
        # new/dirty/deleted still describe the pre-flush state here
        modified = [
            obj for obj in session.dirty
            if session.is_modified(obj, include_collections=False)
        ]
        self._affected_rows += len(session.new) + len(modified) + len(session.deleted)

    def commit(self) -> int:
        """
        Write every staged change in one transaction.

        Returns:
            Number of rows inserted, updated or deleted

        Raises:
            PersistenceError: If the database rejects the write; nothing
                staged since the last commit is kept
        """
        try:
            self.db.flush()
            affected = self._affected_rows
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit rejected, rolling back: {e}", exc_info=True)
            self.rollback()
            raise PersistenceError("commit", f"The database rejected the commit: {type(e).__name__}") from e

        self._affected_rows = 0
        logger.debug(f"Committed {affected} row change(s)")
        return affected

    def rollback(self) -> None:
        """Discard all staged changes."""
        self.db.rollback()
        self._affected_rows = 0

    def close(self) -> None:
        if event.contains(self.db, "after_flush", self._count_flushed_rows):
            event.remove(self.db, "after_flush", self._count_flushed_rows)

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
        self.close()
