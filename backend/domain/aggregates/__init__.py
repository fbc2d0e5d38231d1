"""
Domain Aggregates

Aggregates are clusters of domain objects that can be treated as a single unit.
The aggregate root is the only member of the aggregate that outside objects
are allowed to hold references to.

Examples:
- PackingList: Groups a user's packing list with its Items
"""

from .packing_list import Item, PackingList

__all__ = ["Item", "PackingList"]
