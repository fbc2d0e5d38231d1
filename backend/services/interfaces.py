"""
Service Interfaces

Abstract base classes the use-case services depend on, following the
Dependency Inversion Principle. Implementations are passed in explicitly by
whoever runs the use case (see dependencies.py), so tests can swap them.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Optional


class IUnitOfWork(ABC):
    """
    Commit boundary shared by the repositories of one use case.

    Repository calls only stage changes; exactly one commit() per use case
    makes them durable together.
    """

    @abstractmethod
    def commit(self) -> int:
        """
        Persist every staged change atomically.

        Returns:
            Number of affected rows

        Raises:
            PersistenceError: If the store rejects the write
        """
        pass

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged changes."""
        pass


class IIdentityAccountStore(ABC):
    """
    Boundary to the authentication identity subsystem.

    Only account creation, lookup and removal are needed here; credentials
    and sign-in are handled elsewhere.
    """

    @abstractmethod
    def add(self, account_id: uuid.UUID, email: str) -> None:
        pass

    @abstractmethod
    def find_id_by_email(self, email: str) -> Optional[uuid.UUID]:
        pass

    @abstractmethod
    def delete(self, account_id: uuid.UUID) -> None:
        pass
