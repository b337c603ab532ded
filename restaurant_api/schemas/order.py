"""
Pho Huong Viet Order API — Order schemas

Inbound models are only populated after validate_order() has accepted the
raw payload, so their constraints restate what the validator already checked.
"""
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

from restaurant_api.schemas.menu import Money

MAX_QTY = 99

# Ids are matched against the catalog as given; "14" is not 14
ItemId = Union[StrictInt, StrictFloat, StrictStr]


class DeliveryOutcome(str, Enum):
    SKIPPED = "skipped"
    DELIVERED = "delivered"
    FAILED = "failed"


# ── Inbound ───────────────────────────────────────────────────────────────────
class CustomerIn(BaseModel):
    name: str
    phone: str
    email: str


class OrderItemIn(BaseModel):
    id: ItemId
    qty: int = Field(..., ge=1, le=MAX_QTY)


class OrderRequest(BaseModel):
    customer: CustomerIn
    items: list[OrderItemIn] = Field(..., min_length=1)
    notes: str | None = None


# ── Outbound ──────────────────────────────────────────────────────────────────
class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str
    phone: str


class Customer(BaseModel):
    name: str
    phone: str
    email: str


class ResolvedOrderItem(BaseModel):
    id: int
    name: str
    category: str
    qty: int
    unit_price: Money
    subtotal: Money


class Pricing(BaseModel):
    subtotal: Money
    tax: Money
    total: Money


class Order(BaseModel):
    order_id: str
    placed_at: str
    restaurant: Restaurant
    customer: Customer
    items: list[ResolvedOrderItem]
    pricing: Pricing
    notes: str = ""
    type: Literal["pickup"] = "pickup"


class OrderCreatedResponse(BaseModel):
    success: bool = True
    message: str
    order_id: str
    order: Order
    notification: DeliveryOutcome
    webhook_warning: str | None = None


class ErrorResponse(BaseModel):
    success: bool = False
    errors: list[str]


class HealthResponse(BaseModel):
    status: str
    restaurant: str
    timestamp: str
