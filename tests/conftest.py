"""
Shared fixtures: in-process ASGI client and webhook doubles.
"""
import httpx
import pytest
import pytest_asyncio

from restaurant_api.api.orders import get_forwarder
from restaurant_api.main import app
from restaurant_api.services.webhook import WebhookForwarder

WEBHOOK_URL = "https://hooks.example.com/orders"


@pytest.fixture
def order_payload() -> dict:
    return {
        "customer": {"name": "Jo", "phone": "403-1", "email": "jo@x.com"},
        "items": [{"id": 14, "qty": 2}],
    }


@pytest.fixture
def webhook_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_forwarder(webhook_requests):
    """Build a forwarder whose outbound calls are answered by `respond`."""

    def _make(respond=None, url: str | None = WEBHOOK_URL, secret: str | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            webhook_requests.append(request)
            if respond is None:
                return httpx.Response(200, json={"received": True})
            return respond(request)

        return WebhookForwarder(url, secret, timeout=8.0, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def use_forwarder():
    def _use(forwarder: WebhookForwarder):
        app.dependency_overrides[get_forwarder] = lambda: forwarder

    return _use


@pytest_asyncio.fixture
async def api_client(make_forwarder, use_forwarder):
    # Unconfigured webhook unless a test says otherwise
    use_forwarder(make_forwarder(url=None))
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test"
    ) as client:
        yield client
    app.dependency_overrides.clear()
