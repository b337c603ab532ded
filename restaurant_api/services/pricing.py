"""
Pho Huong Viet Order API — Order builder and pricing

Resolves validated line items against the catalog and assembles the
canonical pickup order. Money is rounded half-up to cents at every stage:
line subtotal, order subtotal, tax, then total.
"""
import uuid
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

from restaurant_api.core.exceptions import MenuItemNotFound
from restaurant_api.schemas.order import (
    Customer,
    Order,
    OrderRequest,
    Pricing,
    ResolvedOrderItem,
)
from restaurant_api.services.catalog import RESTAURANT, MenuCatalog

TAX_RATE = Decimal("0.05")
CENT = Decimal("0.01")


def round2(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def new_order_id(now: datetime) -> str:
    # Millisecond clock alone collides under concurrent load; suffix breaks ties
    return f"ORD-{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:6].upper()}"


def resolve_items(request: OrderRequest, catalog: MenuCatalog) -> list[ResolvedOrderItem]:
    resolved = []
    for line in request.items:
        menu_item = catalog.get(line.id)
        if menu_item is None:
            raise MenuItemNotFound(line.id)
        resolved.append(
            ResolvedOrderItem(
                id=menu_item.id,
                name=menu_item.name,
                category=menu_item.category,
                qty=line.qty,
                unit_price=menu_item.price,
                subtotal=round2(menu_item.price * line.qty),
            )
        )
    return resolved


def price_items(items: list[ResolvedOrderItem]) -> Pricing:
    subtotal = round2(sum((item.subtotal for item in items), Decimal("0")))
    tax = round2(subtotal * TAX_RATE)
    return Pricing(subtotal=subtotal, tax=tax, total=round2(subtotal + tax))


def build_order(
    request: OrderRequest,
    catalog: MenuCatalog,
    now: datetime | None = None,
) -> Order:
    """
    Build a priced Order from a request that has already passed validation.
    Raises MenuItemNotFound for the first unknown id; nothing is built in that case.
    """
    items = resolve_items(request, catalog)
    now = now or datetime.now(timezone.utc)

    return Order(
        order_id=new_order_id(now),
        placed_at=now.isoformat(),
        restaurant=RESTAURANT,
        customer=Customer(
            name=request.customer.name.strip(),
            phone=request.customer.phone.strip(),
            email=request.customer.email.strip().lower(),
        ),
        items=items,
        pricing=price_items(items),
        notes=(request.notes or "").strip(),
    )
