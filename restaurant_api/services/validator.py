"""
Pho Huong Viet Order API — Order request validation

Works on the raw decoded JSON body. Every violated rule contributes its own
message; nothing short-circuits, so a client sees all problems at once.
"""
import re
from typing import Any

from restaurant_api.schemas.order import MAX_QTY

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
CUSTOMER_FIELDS = ("name", "phone", "email")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_valid_qty(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and 1 <= value <= MAX_QTY
    return isinstance(value, int) and 1 <= value <= MAX_QTY


def validate_order(payload: Any) -> list[str]:
    """Return every problem with an order payload; an empty list means valid."""
    errors: list[str] = []
    body = payload if isinstance(payload, dict) else {}

    customer = body.get("customer")
    if not isinstance(customer, dict):
        errors.append("customer is required")
        customer = {}

    for field in CUSTOMER_FIELDS:
        if _is_blank(customer.get(field)):
            errors.append(f"customer.{field} is required")

    email = customer.get("email")
    if not _is_blank(email) and not EMAIL_PATTERN.match(email.strip()):
        errors.append("customer.email must be a valid email address")

    items = body.get("items")
    if not isinstance(items, list):
        errors.append("items must be an array")
    elif not items:
        errors.append("items must contain at least one item")
    else:
        for i, item in enumerate(items):
            if not isinstance(item, dict):
                item = {}
            item_id = item.get("id")
            if not item_id:
                errors.append(f"items[{i}].id is required")
            elif isinstance(item_id, (bool, list, dict)):
                errors.append(f"items[{i}].id must be a number or string")
            if not _is_valid_qty(item.get("qty")):
                errors.append(f"items[{i}].qty must be an integer between 1 and {MAX_QTY}")

    notes = body.get("notes")
    if notes is not None and not isinstance(notes, str):
        errors.append("notes must be a string")

    return errors
