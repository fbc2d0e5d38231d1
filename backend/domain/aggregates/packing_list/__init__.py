from .item import Item
from .packing_list import PackingList

__all__ = ["Item", "PackingList"]
