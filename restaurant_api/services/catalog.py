"""
Pho Huong Viet Order API — Menu catalog

[REFERENCE DATA] — fixed for the lifetime of the process, never mutated.
"""
from decimal import Decimal
from functools import lru_cache
from typing import Any, Iterable

from restaurant_api.schemas.menu import MenuItem
from restaurant_api.schemas.order import Restaurant

RESTAURANT = Restaurant(
    name="Pho Huong Viet",
    address="1216 17 Ave SW, Calgary, AB T2T 0B8",
    phone="(403) 555-0142",
)

MENU_ITEMS: list[dict[str, Any]] = [
    # ── Appetizers ──
    {"id": 1, "category": "Appetizers", "name": "Crispy Spring Rolls (Chả Giò)", "price": "8.95",
     "description": "Three pork and vegetable rolls with fish sauce dip"},
    {"id": 2, "category": "Appetizers", "name": "Fresh Salad Rolls (Gỏi Cuốn)", "price": "7.95",
     "description": "Shrimp, pork, vermicelli and herbs with peanut sauce"},
    {"id": 3, "category": "Appetizers", "name": "Lemongrass Chicken Wings", "price": "11.50",
     "description": "Six wings tossed in lemongrass and garlic"},
    {"id": 4, "category": "Appetizers", "name": "Green Papaya Salad", "price": "9.25",
     "description": "Shredded papaya, carrot, herbs and roasted peanuts"},
    # ── Pho ──
    {"id": 5, "category": "Pho", "name": "Rare Beef Pho (Phở Tái)", "price": "15.95",
     "description": "Thinly sliced rare beef in slow-simmered beef broth"},
    {"id": 6, "category": "Pho", "name": "House Special Pho (Phở Đặc Biệt)", "price": "17.95",
     "description": "Rare beef, brisket, meatballs and tendon"},
    {"id": 7, "category": "Pho", "name": "Chicken Pho (Phở Gà)", "price": "15.50",
     "description": "Poached chicken in clear chicken broth"},
    {"id": 8, "category": "Pho", "name": "Vegetable Pho", "price": "14.95",
     "description": "Tofu and seasonal vegetables in vegetable broth"},
    # ── Vermicelli & Rice ──
    {"id": 9, "category": "Vermicelli & Rice", "name": "Grilled Pork Vermicelli (Bún Thịt Nướng)", "price": "16.25",
     "description": "Chargrilled pork over vermicelli with herbs and a spring roll"},
    {"id": 10, "category": "Vermicelli & Rice", "name": "Spicy Hue Beef Noodle (Bún Bò Huế)", "price": "16.95",
     "description": "Lemongrass chili broth with beef shank and round noodles"},
    {"id": 11, "category": "Vermicelli & Rice", "name": "Broken Rice Combo (Cơm Tấm)", "price": "17.50",
     "description": "Grilled pork chop, shredded pork skin and fried egg"},
    {"id": 12, "category": "Vermicelli & Rice", "name": "Grilled Pork Banh Mi", "price": "10.75",
     "description": "Toasted baguette, pickled vegetables, cilantro and jalapeño"},
    # ── Drinks ──
    {"id": 13, "category": "Drinks", "name": "Vietnamese Iced Coffee (Cà Phê Sữa Đá)", "price": "5.50",
     "description": "Dark roast drip coffee with condensed milk"},
    {"id": 14, "category": "Drinks", "name": "Fresh Lime Soda (Soda Chanh)", "price": "5.00",
     "description": "Squeezed lime, sugar and soda water"},
    {"id": 15, "category": "Drinks", "name": "Taro Bubble Tea", "price": "6.25",
     "description": "Taro milk tea with tapioca pearls"},
    {"id": 16, "category": "Drinks", "name": "Canned Soft Drink", "price": "2.50",
     "description": "Coke, Diet Coke, Sprite or Ginger Ale"},
    # ── Desserts ──
    {"id": 17, "category": "Desserts", "name": "Three Color Dessert (Chè Ba Màu)", "price": "6.50",
     "description": "Mung bean, red bean and pandan jelly with coconut milk"},
    {"id": 18, "category": "Desserts", "name": "Coconut Jelly", "price": "4.75",
     "description": "Layered coconut and pandan jelly"},
]


class MenuCatalog:
    """Read-only lookup over the sellable menu items."""

    def __init__(self, items: Iterable[MenuItem]):
        self._items = tuple(items)
        self._by_id: dict[int, MenuItem] = {}
        for item in self._items:
            if item.id in self._by_id:
                raise ValueError(f"Duplicate menu item id: {item.id}")
            self._by_id[item.id] = item

    @classmethod
    def from_records(cls, records: Iterable[dict[str, Any]]) -> "MenuCatalog":
        return cls(
            MenuItem.model_validate({**record, "price": Decimal(str(record["price"]))})
            for record in records
        )

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return self._items

    def __len__(self) -> int:
        return len(self._items)

    def get(self, item_id: Any) -> MenuItem | None:
        """Exact-id lookup. Only numbers match; strings and booleans never do."""
        if isinstance(item_id, bool):
            return None
        if isinstance(item_id, float):
            if not item_id.is_integer():
                return None
            item_id = int(item_id)
        if not isinstance(item_id, int):
            return None
        return self._by_id.get(item_id)

    def by_category(self) -> dict[str, list[MenuItem]]:
        grouped: dict[str, list[MenuItem]] = {}
        for item in self._items:
            grouped.setdefault(item.category, []).append(item)
        return grouped


@lru_cache()
def get_catalog() -> MenuCatalog:
    return MenuCatalog.from_records(MENU_ITEMS)
