"""
Repository Contracts

Storage-agnostic read/write operations, one contract per aggregate type.

Contract guarantees shared by every implementation:
- get_by_id returns None for an unknown id, never raises
- add must only be called with aggregates that were never stored
- update and delete on an unknown id are silent no-ops
- no method commits; the unit of work finalizes staged changes
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from domain.aggregates.packing_list import PackingList
from domain.entities.user import User


class IUserRepository(ABC):
    """Persistence contract for User aggregates."""

    @abstractmethod
    def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        pass

    @abstractmethod
    def get_all(self) -> List[User]:
        pass

    @abstractmethod
    def add(self, user: User) -> None:
        pass

    @abstractmethod
    def update(self, user: User) -> None:
        pass

    @abstractmethod
    def delete(self, user_id: uuid.UUID) -> None:
        pass


class IPackingListRepository(ABC):
    """Persistence contract for PackingList aggregates, including their items."""

    @abstractmethod
    def get_by_id(self, packing_list_id: uuid.UUID) -> Optional[PackingList]:
        pass

    @abstractmethod
    def get_all_by_owner_id(self, owner_id: uuid.UUID) -> List[PackingList]:
        pass

    @abstractmethod
    def add(self, packing_list: PackingList) -> None:
        pass

    @abstractmethod
    def update(self, packing_list: PackingList) -> None:
        """
        Bring the stored list and its item rows in line with packing_list.

        Item rows are matched by id only: missing ids are deleted, new ids
        inserted, existing ids updated in place.
        """

    @abstractmethod
    def delete(self, packing_list_id: uuid.UUID) -> None:
        pass
