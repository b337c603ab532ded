"""
Pho Huong Viet Order API — Orders API

Flow:
  1. Decode the JSON body and collect every validation error (400 if any)
  2. Resolve items against the catalog and price the order (400 on unknown id)
  3. Forward the order to the notification webhook, best effort
  4. Accept the order whatever the webhook outcome; the response says which
"""
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from restaurant_api.core.config import Settings, get_settings
from restaurant_api.schemas.order import (
    DeliveryOutcome,
    ErrorResponse,
    OrderCreatedResponse,
    OrderRequest,
)
from restaurant_api.services.catalog import MenuCatalog, get_catalog
from restaurant_api.services.pricing import build_order
from restaurant_api.services.validator import validate_order
from restaurant_api.services.webhook import WebhookForwarder

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/orders", tags=["orders"])

# outcome -> (message, webhook_warning)
OUTCOME_RESPONSES: dict[DeliveryOutcome, tuple[str, str | None]] = {
    DeliveryOutcome.DELIVERED: (
        "Order placed successfully. The restaurant has been notified.",
        None,
    ),
    DeliveryOutcome.SKIPPED: (
        "Order placed successfully.",
        "Order webhook is not configured; the restaurant was not notified automatically.",
    ),
    DeliveryOutcome.FAILED: (
        "Order received, but the restaurant notification is delayed.",
        "We could not reach the restaurant right away. Please call to confirm your pickup time.",
    ),
}


def get_forwarder(settings: Settings = Depends(get_settings)) -> WebhookForwarder:
    return WebhookForwarder.from_settings(settings)


def reject(errors: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(errors=errors).model_dump(),
    )


@router.post(
    "",
    response_model=OrderCreatedResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_order(
    request: Request,
    catalog: MenuCatalog = Depends(get_catalog),
    forwarder: WebhookForwarder = Depends(get_forwarder),
):
    """
    Place a pickup order. Unknown menu ids surface as MenuItemNotFound and are
    turned into a 400 by the app-level exception handler.
    """
    try:
        payload = await request.json()
    except ValueError:
        return reject(["Request body must be valid JSON"])

    errors = validate_order(payload)
    if errors:
        logger.info("Order rejected with %d validation error(s)", len(errors))
        return reject(errors)

    order = build_order(OrderRequest.model_validate(payload), catalog)
    logger.info(
        "Order %s accepted: %d item(s), total %s",
        order.order_id, len(order.items), order.pricing.total,
    )

    outcome = await forwarder.deliver(order)
    message, warning = OUTCOME_RESPONSES[outcome]

    return OrderCreatedResponse(
        message=message,
        order_id=order.order_id,
        order=order,
        notification=outcome,
        webhook_warning=warning,
    )
