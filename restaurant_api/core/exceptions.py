"""
Pho Huong Viet Order API — Domain exceptions
"""
from typing import Any


class MenuItemNotFound(LookupError):
    """Raised when an order line references an id that is not in the catalog."""

    def __init__(self, item_id: Any):
        self.item_id = item_id
        super().__init__(f"Menu item not found: {item_id}")
