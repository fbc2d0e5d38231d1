"""
Item reconciliation planning.

Works out which stored item rows have to be deleted, updated in place or
inserted so that the stored children of a packing list match the items of
the in-memory aggregate. Rows and items are matched strictly by id; names
play no part in matching.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from domain.aggregates.packing_list import Item
from models import ItemRecord


@dataclass
class ItemChangeSet:
    """
    Minimal set of row operations for one packing list.

    to_update only holds rows whose name or packed flag differs; rows that
    already match are counted in unchanged and left alone.
    """

    to_delete: List[ItemRecord] = field(default_factory=list)
    to_update: List[Tuple[ItemRecord, Item]] = field(default_factory=list)
    to_insert: List[Item] = field(default_factory=list)
    unchanged: int = 0

    @property
    def is_empty(self) -> bool:
        return not (self.to_delete or self.to_update or self.to_insert)

    def summary(self) -> dict:
        return {
            "deleted": len(self.to_delete),
            "updated": len(self.to_update),
            "inserted": len(self.to_insert),
            "unchanged": self.unchanged,
        }


def plan_item_changes(existing_rows: Iterable[ItemRecord], items: Iterable[Item]) -> ItemChangeSet:
    """
    Compare stored rows against the desired items.

    Args:
        existing_rows: Item rows currently stored for the list
        items: Items of the in-memory aggregate (the desired end state)

    Returns:
        ItemChangeSet describing deletions, in-place updates and inserts
    """
    rows_by_id = {row.id: row for row in existing_rows}
    wanted = {str(item.id): item for item in items}

    changes = ItemChangeSet()

    for row_id, row in rows_by_id.items():
        if row_id not in wanted:
            changes.to_delete.append(row)

    for item_id, item in wanted.items():
        row = rows_by_id.get(item_id)
        if row is None:
            changes.to_insert.append(item)
        elif row.name != item.name or bool(row.is_packed) != item.is_packed:
            changes.to_update.append((row, item))
        else:
            changes.unchanged += 1

    return changes
