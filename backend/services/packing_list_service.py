"""
Packing List Service

Use cases over the PackingList aggregate. Every change follows the same
path: load the aggregate, call one of its methods, hand it back to the
repository for reconciliation, commit once.

Domain validation errors propagate unchanged.
"""

import logging
import uuid
from typing import Callable, List, Optional

from domain.aggregates.packing_list import PackingList
from domain.repositories import IPackingListRepository
from dtos.request.packing_list_request import CreatePackingListRequest
from dtos.response.packing_list_response import ItemResponse, PackingListResponse
from exceptions import NotFoundError
from services.interfaces import IUnitOfWork
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class PackingListService:
    """Service for packing list use cases."""

    def __init__(self, packing_lists: IPackingListRepository, unit_of_work: IUnitOfWork):
        """
        Initialize PackingListService.

        Args:
            packing_lists: Repository sharing the unit of work's session
            unit_of_work: Commit boundary for this use case
        """
        self.packing_lists = packing_lists
        self.unit_of_work = unit_of_work

    def _load(self, packing_list_id: uuid.UUID) -> PackingList:
        packing_list = self.packing_lists.get_by_id(packing_list_id)
        if packing_list is None:
            raise NotFoundError("PackingList", packing_list_id)
        return packing_list

    def _change(
        self,
        packing_list_id: uuid.UUID,
        mutate: Callable[[PackingList], None],
    ) -> PackingList:
        packing_list = self._load(packing_list_id)
        mutate(packing_list)
        self._save(packing_list)
        return packing_list

    def _save(self, packing_list: PackingList) -> None:
        self.packing_lists.update(packing_list)
        affected = self.unit_of_work.commit()
        logger.debug(f"Packing list {packing_list.id} saved, {affected} row(s) changed")

    @log_operation("create_packing_list")
    def create_packing_list(self, request: CreatePackingListRequest) -> PackingListResponse:
        """
        Create an empty packing list.

        Raises:
            InvalidArgumentError: If the name is blank or the owner id is empty
        """
        packing_list = PackingList.create(request.name, request.owner_id)
        self.packing_lists.add(packing_list)
        self.unit_of_work.commit()
        return PackingListResponse.from_domain(packing_list)

    def get_packing_list(self, packing_list_id: uuid.UUID) -> Optional[PackingListResponse]:
        packing_list = self.packing_lists.get_by_id(packing_list_id)
        return PackingListResponse.from_domain(packing_list) if packing_list else None

    def get_packing_lists_for_owner(self, owner_id: uuid.UUID) -> List[PackingListResponse]:
        return [
            PackingListResponse.from_domain(packing_list)
            for packing_list in self.packing_lists.get_all_by_owner_id(owner_id)
        ]

    @log_operation("rename_packing_list")
    def rename_packing_list(self, packing_list_id: uuid.UUID, name: str) -> PackingListResponse:
        packing_list = self._change(packing_list_id, lambda pl: pl.change_name(name))
        return PackingListResponse.from_domain(packing_list)

    @log_operation("add_item")
    def add_item(self, packing_list_id: uuid.UUID, name: str) -> ItemResponse:
        """
        Add an item to a list.

        Returns:
            The new item, with the id it was stored under
        """
        packing_list = self._load(packing_list_id)
        item = packing_list.add_item(name)
        self._save(packing_list)
        return ItemResponse.from_domain(item)

    @log_operation("remove_item")
    def remove_item(self, packing_list_id: uuid.UUID, item_id: uuid.UUID) -> PackingListResponse:
        packing_list = self._change(packing_list_id, lambda pl: pl.remove_item(item_id))
        return PackingListResponse.from_domain(packing_list)

    @log_operation("rename_item")
    def rename_item(self, packing_list_id: uuid.UUID, item_id: uuid.UUID, name: str) -> PackingListResponse:
        packing_list = self._change(packing_list_id, lambda pl: pl.change_item_name(item_id, name))
        return PackingListResponse.from_domain(packing_list)

    @log_operation("mark_item_packed")
    def mark_item_packed(self, packing_list_id: uuid.UUID, item_id: uuid.UUID) -> PackingListResponse:
        packing_list = self._change(packing_list_id, lambda pl: pl.mark_item_as_packed(item_id))
        return PackingListResponse.from_domain(packing_list)

    @log_operation("mark_item_unpacked")
    def mark_item_unpacked(self, packing_list_id: uuid.UUID, item_id: uuid.UUID) -> PackingListResponse:
        packing_list = self._change(packing_list_id, lambda pl: pl.mark_item_as_unpacked(item_id))
        return PackingListResponse.from_domain(packing_list)

    @log_operation("delete_packing_list")
    def delete_packing_list(self, packing_list_id: uuid.UUID) -> None:
        """Delete a list and its items; unknown ids are ignored."""
        self.packing_lists.delete(packing_list_id)
        self.unit_of_work.commit()
