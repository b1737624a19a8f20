"""Tests for the dashboard and health endpoints.

The controller dependency is overridden with one backed by an
httpx.MockTransport orders API.
"""
import httpx
import pytest
from httpx import AsyncClient, ASGITransport

from admin_dashboard.api.deps import get_dashboard_controller
from admin_dashboard.main import app
from admin_dashboard.schemas.metrics import MetricsConfig
from admin_dashboard.services.dashboard import DashboardController
from admin_dashboard.services.orders import OrdersClient

ORDERS_PAYLOAD = {
    "orders": [
        {"status": "Delivered", "price": 500},
        {"status": "Pending", "price": 300},
        {"status": "Delivered", "price": 200},
    ]
}


@pytest.fixture
def orders_responses() -> list[httpx.Response]:
    """Responses the fake orders API returns, one per request."""
    return []


@pytest.fixture
def controller(orders_responses):
    def handler(request: httpx.Request) -> httpx.Response:
        return orders_responses.pop(0)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    controller = DashboardController(
        OrdersClient(url="http://orders.test/get-orders", http_client=http_client),
        MetricsConfig(profit_margin=65, growth_rate=82, total_products=89),
    )
    app.dependency_overrides[get_dashboard_controller] = lambda: controller
    yield controller
    app.dependency_overrides.clear()


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_health_returns_ok_status():
    async with _client() as client:
        response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_dashboard_is_idle_before_first_refresh(controller):
    async with _client() as client:
        response = await client.get("/api/v1/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "idle"
    assert data["generation"] == 0
    assert data["metrics"] is None
    assert data["error"] is None


@pytest.mark.asyncio
async def test_refresh_returns_ready_view(controller, orders_responses):
    orders_responses.append(httpx.Response(200, json=ORDERS_PAYLOAD))

    async with _client() as client:
        response = await client.post("/api/v1/dashboard/refresh")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["metrics"] == {
        "total_orders": 3,
        "delivered_orders": 2,
        "completion_rate": 67,
        "total_revenue": 1000.0,
        "profit_margin": 65,
        "growth_rate": 82,
    }
    order_chart = data["charts"][0]
    assert order_chart["title"] == "Order Status"
    assert [s["value"] for s in order_chart["slices"]] == [2, 1]
    assert all(type(s["value"]) is int for chart in data["charts"] for s in chart["slices"])
    assert type(data["cards"][0]["value"]) is int
    assert type(data["cards"][1]["value"]) is int
    assert [c["title"] for c in data["cards"]] == [
        "Total Orders",
        "Orders Delivered",
        "Revenue Generated",
        "Total Products",
    ]


@pytest.mark.asyncio
async def test_refresh_failure_is_reported_in_view(controller, orders_responses):
    orders_responses.append(httpx.Response(500, text="oops"))

    async with _client() as client:
        response = await client.post("/api/v1/dashboard/refresh")
        metrics_response = await client.get("/api/v1/dashboard/metrics")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "failed"
    assert data["metrics"] is None
    assert data["error"]["kind"] == "TransportFailure"
    assert data["error"]["status_code"] == 500

    assert metrics_response.status_code == 409
    assert "HTTP 500" in metrics_response.json()["detail"]


@pytest.mark.asyncio
async def test_retry_after_failure(controller, orders_responses):
    orders_responses.extend([
        httpx.Response(200, json={"items": []}),
        httpx.Response(200, json=ORDERS_PAYLOAD),
    ])

    async with _client() as client:
        first = await client.post("/api/v1/dashboard/refresh")
        second = await client.post("/api/v1/dashboard/refresh")
        metrics = await client.get("/api/v1/dashboard/metrics")

    assert first.json()["error"]["kind"] == "MalformedResponse"
    assert second.json()["status"] == "ready"
    assert second.json()["generation"] == 2
    assert metrics.status_code == 200
    assert metrics.json()["completion_rate"] == 67


@pytest.mark.asyncio
async def test_metrics_unavailable_while_idle(controller):
    async with _client() as client:
        response = await client.get("/api/v1/dashboard/metrics")

    assert response.status_code == 409
    assert "idle" in response.json()["detail"]
