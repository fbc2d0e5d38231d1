"""
Packing list repository.

Stores PackingList aggregates in the packing_lists table and their items in
the items table. update() reconciles the stored item rows against the
aggregate instead of replacing them, so an item that keeps its id keeps its
row.
"""

import logging
import uuid
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload

from domain.aggregates.packing_list import PackingList
from domain.repositories import IPackingListRepository
from models import PackingListRecord
from .base_repository import BaseRepository
from .mappers import item_from_domain, packing_list_from_domain, packing_list_to_domain
from .reconciliation import ItemChangeSet, plan_item_changes

logger = logging.getLogger(__name__)


class PackingListRepository(BaseRepository[PackingListRecord], IPackingListRepository):
    """Repository for PackingList aggregates and their items."""

    def __init__(self, db: Session):
        super().__init__(db, PackingListRecord)

    def _get_with_items(self, packing_list_id: uuid.UUID) -> Optional[PackingListRecord]:
        return self.db.query(self.model).options(
            joinedload(self.model.items)
        ).filter(self.model.id == str(packing_list_id)).first()

    def get_by_id(self, packing_list_id: uuid.UUID) -> Optional[PackingList]:
        """
        Load a packing list with its items.

        Returns:
            PackingList, or None if no row has this id
        """
        record = self._get_with_items(packing_list_id)
        return packing_list_to_domain(record) if record else None

    def get_all_by_owner_id(self, owner_id: uuid.UUID) -> List[PackingList]:
        """
        Load every packing list referencing the given user.

        Args:
            owner_id: User id

        Returns:
            List of packing lists with their items, possibly empty
        """
        records = self.db.query(self.model).options(
            joinedload(self.model.items)
        ).filter(self.model.user_id == str(owner_id)).all()
        return [packing_list_to_domain(record) for record in records]

    def add(self, packing_list: PackingList) -> None:
        self._stage_add(packing_list_from_domain(packing_list))

    def update(self, packing_list: PackingList) -> None:
        """
        Reconcile the stored list with the in-memory aggregate.

        Order: scalar fields, deletion of rows whose id left the aggregate,
        then in-place updates and inserts. Does nothing when the list was
        never stored.
        """
        record = self._get_with_items(packing_list.id)
        if record is None:
            logger.debug(f"Update skipped, packing list {packing_list.id} is not stored")
            return

        record.name = packing_list.name
        record.user_id = str(packing_list.owner_id)

        changes = plan_item_changes(record.items, packing_list.items)
        self._apply_item_changes(record, changes)

        logger.debug(
            f"Reconciled packing list {packing_list.id}",
            extra={"packing_list_id": str(packing_list.id), **changes.summary()},
        )

    def _apply_item_changes(self, record: PackingListRecord, changes: ItemChangeSet) -> None:
        for row in changes.to_delete:
            record.items.remove(row)
            self._stage_delete(row)

        for row, item in changes.to_update:
            row.name = item.name
            row.is_packed = item.is_packed

        for item in changes.to_insert:
            record.items.append(item_from_domain(item))

    def delete(self, packing_list_id: uuid.UUID) -> None:
        """Delete the list; its item rows go with it."""
        record = self._get_with_items(packing_list_id)
        if record is not None:
            self._stage_delete(record)
