"""
Pho Huong Viet Order API — Order notification webhook

Best-effort delivery of a placed order to the restaurant's notification
endpoint. deliver() never raises: every failure becomes DeliveryOutcome.FAILED
and the caller decides what the customer sees.
"""
import asyncio
import logging

import httpx

from restaurant_api.core.config import Settings
from restaurant_api.schemas.order import DeliveryOutcome, Order

logger = logging.getLogger(__name__)

SECRET_HEADER = "X-Webhook-Secret"


class WebhookForwarder:
    def __init__(
        self,
        url: str | None,
        secret: str | None = None,
        timeout: float = 8.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url or None
        self.secret = secret or None
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "WebhookForwarder":
        return cls(
            url=settings.WEBHOOK_URL,
            secret=settings.WEBHOOK_SECRET,
            timeout=settings.WEBHOOK_TIMEOUT_SECONDS,
            **kwargs,
        )

    @property
    def configured(self) -> bool:
        return self.url is not None

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.secret:
            headers[SECRET_HEADER] = self.secret
        return headers

    async def _post(self, order: Order) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            return await client.post(
                self.url,
                json=order.model_dump(mode="json"),
                headers=self._headers(),
            )

    async def deliver(self, order: Order) -> DeliveryOutcome:
        if not self.configured:
            logger.info("Webhook not configured; order %s not forwarded", order.order_id)
            return DeliveryOutcome.SKIPPED

        try:
            # httpx times each phase separately; the outer bound caps the whole exchange
            response = await asyncio.wait_for(self._post(order), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(
                "Webhook timed out after %.1fs for order %s", self.timeout, order.order_id
            )
            return DeliveryOutcome.FAILED
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Webhook unreachable for order %s: %s", order.order_id, exc)
            return DeliveryOutcome.FAILED

        if not response.is_success:
            logger.warning(
                "Webhook rejected order %s with status %s", order.order_id, response.status_code
            )
            return DeliveryOutcome.FAILED

        logger.info("Order %s delivered to webhook", order.order_id)
        return DeliveryOutcome.DELIVERED
