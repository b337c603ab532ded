"""
HTTP API tests (in-process ASGI)

Tests:
  1. Health and menu endpoints
  2. Order acceptance for each webhook outcome
  3. Order rejection shapes (validation, unknown id, bad JSON)
  4. Unmatched routes return the JSON 404
  5. Static pages and API URL injection
"""
import json
from datetime import datetime

import httpx
import pytest

from restaurant_api.core.config import Settings, get_settings
from restaurant_api.main import app
from restaurant_api.services.webhook import SECRET_HEADER


ROUTE_NOT_FOUND = {"success": False, "error": "Route not found"}


# ─── Test 1: Health & Menu ─────────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_health(api_client):
    r = await api_client.get("/api/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["restaurant"] == "Pho Huong Viet"
    assert datetime.fromisoformat(body["timestamp"])


@pytest.mark.asyncio
async def test_menu_grouped_and_flat(api_client):
    r = await api_client.get("/api/menu")

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert list(body["menu"]) == ["Appetizers", "Pho", "Vermicelli & Rice", "Drinks", "Desserts"]
    assert len(body["items"]) == sum(len(items) for items in body["menu"].values())

    lime_soda = next(item for item in body["items"] if item["id"] == 14)
    assert lime_soda["price"] == 5.0
    assert lime_soda["category"] == "Drinks"
    assert set(lime_soda) == {"id", "category", "name", "price", "description"}


# ─── Test 2: Accepted orders ───────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_order_without_webhook_is_accepted(api_client, order_payload, webhook_requests):
    r = await api_client.post("/api/orders", json=order_payload)

    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["notification"] == "skipped"
    assert "not configured" in body["webhook_warning"]
    assert body["order_id"] == body["order"]["order_id"]
    assert body["order"]["pricing"] == {"subtotal": 10.0, "tax": 0.5, "total": 10.5}
    assert body["order"]["items"][0]["unit_price"] == 5.0
    assert webhook_requests == []


@pytest.mark.asyncio
async def test_order_delivered_to_webhook(
    api_client, order_payload, make_forwarder, use_forwarder, webhook_requests
):
    use_forwarder(make_forwarder(secret="kitchen-printer"))

    r = await api_client.post("/api/orders", json=order_payload)

    assert r.status_code == 201
    body = r.json()
    assert body["notification"] == "delivered"
    assert "webhook_warning" not in body

    (sent,) = webhook_requests
    assert sent.headers[SECRET_HEADER] == "kitchen-printer"
    assert json.loads(sent.content) == body["order"]


@pytest.mark.asyncio
async def test_webhook_failure_still_accepts_order(
    api_client, order_payload, make_forwarder, use_forwarder
):
    def _down(request):
        raise httpx.ConnectError("connection refused", request=request)

    use_forwarder(make_forwarder(respond=_down))

    r = await api_client.post("/api/orders", json=order_payload)

    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["notification"] == "failed"
    assert body["webhook_warning"]
    assert body["order"]["customer"]["email"] == "jo@x.com"


# ─── Test 3: Rejected orders ───────────────────────────────────────────────────
@pytest.mark.asyncio
async def test_validation_errors_are_returned_together(api_client):
    r = await api_client.post(
        "/api/orders",
        json={"customer": {"name": "Jo", "phone": "", "email": "jo"}, "items": []},
    )

    assert r.status_code == 400
    assert r.json() == {
        "success": False,
        "errors": [
            "customer.phone is required",
            "customer.email must be a valid email address",
            "items must contain at least one item",
        ],
    }


@pytest.mark.asyncio
async def test_unknown_menu_item_is_a_client_error(api_client, order_payload, webhook_requests):
    order_payload["items"] = [{"id": 14, "qty": 1}, {"id": 999, "qty": 1}]

    r = await api_client.post("/api/orders", json=order_payload)

    assert r.status_code == 400
    assert r.json() == {"success": False, "errors": ["Menu item not found: 999"]}
    assert webhook_requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"{not json", b""])
async def test_unparseable_body(api_client, content):
    r = await api_client.post(
        "/api/orders", content=content, headers={"Content-Type": "application/json"}
    )

    assert r.status_code == 400
    assert r.json() == {"success": False, "errors": ["Request body must be valid JSON"]}


@pytest.mark.asyncio
@pytest.mark.parametrize("qty", [1e30, 10**30, 100])
async def test_oversized_qty_is_a_client_error(api_client, order_payload, webhook_requests, qty):
    order_payload["items"] = [{"id": 14, "qty": qty}]

    r = await api_client.post("/api/orders", json=order_payload)

    assert r.status_code == 400
    assert r.json() == {
        "success": False,
        "errors": ["items[0].qty must be an integer between 1 and 99"],
    }
    assert webhook_requests == []


@pytest.mark.asyncio
async def test_json_array_body_is_a_validation_error(api_client):
    r = await api_client.post("/api/orders", json=[{"id": 14, "qty": 1}])

    assert r.status_code == 400
    assert "customer is required" in r.json()["errors"]


# ─── Test 4: Unmatched routes ──────────────────────────────────────────────────
@pytest.mark.asyncio
@pytest.mark.parametrize("method,path", [
    ("GET", "/api/nope"),
    ("GET", "/api"),
    ("POST", "/api/menu"),
    ("DELETE", "/api/orders"),
    ("POST", "/checkout"),
])
async def test_unmatched_routes(api_client, method, path):
    r = await api_client.request(method, path)

    assert r.status_code == 404
    assert r.json() == ROUTE_NOT_FOUND


# ─── Test 5: Static pages ──────────────────────────────────────────────────────
@pytest.fixture
def public_dir(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Pho Huong Viet</h1>", encoding="utf-8")
    (tmp_path / "order.html").write_text(
        '<script>const API_URL = "__RESTAURANT_API_URL__";</script>', encoding="utf-8"
    )
    (tmp_path / "styles.css").write_text("body { color: red; }", encoding="utf-8")
    settings = Settings(PUBLIC_DIR=tmp_path, RESTAURANT_API_URL="https://api.phohuongviet.example/")
    app.dependency_overrides[get_settings] = lambda: settings
    return tmp_path


@pytest.mark.asyncio
async def test_index_page(api_client, public_dir):
    r = await api_client.get("/")

    assert r.status_code == 200
    assert "Pho Huong Viet" in r.text


@pytest.mark.asyncio
async def test_order_page_gets_api_url(api_client, public_dir):
    r = await api_client.get("/order.html")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert 'const API_URL = "https://api.phohuongviet.example/api";' in r.text
    assert "__RESTAURANT_API_URL__" not in r.text


@pytest.mark.asyncio
async def test_static_asset_and_fallback(api_client, public_dir):
    css = await api_client.get("/styles.css")
    fallback = await api_client.get("/menu/specials")

    assert css.text == "body { color: red; }"
    assert fallback.status_code == 200
    assert fallback.text == "<h1>Pho Huong Viet</h1>"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/%00", "/a%00.css"])
async def test_nul_byte_paths_fall_back_to_index(api_client, public_dir, path):
    r = await api_client.get(path)

    assert r.status_code == 200
    assert r.text == "<h1>Pho Huong Viet</h1>"


@pytest.mark.asyncio
async def test_api_misses_never_fall_back_to_html(api_client, public_dir):
    r = await api_client.get("/api/specials")
    assert r.json() == ROUTE_NOT_FOUND


@pytest.mark.asyncio
async def test_missing_site_is_a_404(api_client, tmp_path):
    app.dependency_overrides[get_settings] = lambda: Settings(PUBLIC_DIR=tmp_path)
    r = await api_client.get("/")
    assert r.json() == ROUTE_NOT_FOUND
