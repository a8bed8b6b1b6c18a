"""
Pytest configuration and shared fixtures for the recent orders function.

This module provides common test fixtures used across unit and integration
tests, including an in-memory BigCommerce API served through httpx.MockTransport.
"""

import os
import re
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

# Powertools and the env modeler read these at import/call time
os.environ.update({
    "POWERTOOLS_SERVICE_NAME": "test-recent-orders",
    "POWERTOOLS_METRICS_NAMESPACE": "TestSocialProof",
    "POWERTOOLS_TRACE_DISABLED": "true",
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
    "LOG_LEVEL": "DEBUG",
})

import httpx
import pytest

from social_proof.dal.bigcommerce_client import BigCommerceClient
from social_proof.handlers.utils.observability import metrics

STORE_HASH = "abc123"
ACCESS_TOKEN = "test-access-token"
OPTIONAL_ENV_VARS = (
    "BC_API_BASE_URL",
    "DEFAULT_STATUS_ID",
    "FETCH_MODE",
    "STOREFRONT_BASE_URL",
    "PLACEHOLDER_IMAGE_URL",
)


class FakeBigCommerce:
    """In-memory BigCommerce API recording every request it serves."""

    def __init__(self, store_hash: str = STORE_HASH):
        self.prefix = f"/stores/{store_hash}"
        self.orders: List[Dict[str, Any]] = []
        self.order_products: Dict[int, List[Dict[str, Any]]] = {}
        self.catalog: Dict[int, Dict[str, Any]] = {}
        self.failures: Dict[str, int] = {}
        self.transport_errors: set = set()
        self.raw_bodies: Dict[str, str] = {}
        self.requests: List[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def client(self) -> BigCommerceClient:
        return BigCommerceClient(
            store_hash=STORE_HASH,
            access_token=ACCESS_TOKEN,
            transport=self.transport,
        )

    def add_order(
        self,
        order_id: int,
        billing_city: Optional[str] = "Austin",
        shipping_addresses: Any = None,
        products: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        order = {
            "id": order_id,
            "status_id": 2,
            "billing_address": {"first_name": "Ada", "city": billing_city},
            "shipping_addresses": shipping_addresses or {
                "url": f"https://api.bigcommerce.com/stores/{STORE_HASH}/v2/orders/{order_id}/shippingaddresses",
                "resource": f"/orders/{order_id}/shippingaddresses",
            },
        }
        self.orders.append(order)
        if products is None:
            products = [{"id": order_id * 10, "name": f"Product {order_id}", "product_id": order_id + 1000}]
        self.order_products[order_id] = products
        return order

    def add_catalog_product(
        self,
        product_id: int,
        thumbnail: Optional[str] = None,
        custom_url: Optional[str] = None,
    ) -> None:
        data: Dict[str, Any] = {"id": product_id, "images": []}
        if thumbnail:
            data["images"].append({"id": 1, "url_thumbnail": thumbnail})
        if custom_url:
            data["custom_url"] = {"url": custom_url, "is_customized": False}
        self.catalog[product_id] = data

    def routes(self) -> List[str]:
        return [request.url.path[len(self.prefix):] for request in self.requests]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = request.url.path[len(self.prefix):]

        if route in self.transport_errors:
            raise httpx.ConnectError("connection refused", request=request)
        if route in self.failures:
            return httpx.Response(self.failures[route], text='[{"status":500,"message":"boom"}]')
        if route in self.raw_bodies:
            return httpx.Response(200, text=self.raw_bodies[route], headers={"Content-Type": "text/html"})

        if route == "/v2/orders":
            if not self.orders:
                return httpx.Response(204)
            return httpx.Response(200, json=self.orders)

        match = re.fullmatch(r"/v2/orders/(\d+)/products", route)
        if match:
            return httpx.Response(200, json=self.order_products.get(int(match.group(1)), []))

        match = re.fullmatch(r"/v3/catalog/products/(\d+)", route)
        if match:
            product = self.catalog.get(int(match.group(1)))
            if product is None:
                return httpx.Response(404, json={"status": 404, "title": "Product not found"})
            return httpx.Response(200, json={"data": product, "meta": {}})

        return httpx.Response(404)


@pytest.fixture(autouse=True)
def bigcommerce_env(monkeypatch):
    """Provide valid credentials and reset optional configuration."""
    monkeypatch.setenv("BC_STORE_HASH", STORE_HASH)
    monkeypatch.setenv("BC_ACCESS_TOKEN", ACCESS_TOKEN)
    for name in OPTIONAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_metrics():
    """Drop metrics recorded outside a decorated handler."""
    yield
    metrics.clear_metrics()


@pytest.fixture
def fake_bigcommerce() -> FakeBigCommerce:
    return FakeBigCommerce()


@pytest.fixture
def commerce_client(fake_bigcommerce):
    """BigCommerce client wired to the in-memory API."""
    with fake_bigcommerce.client() as client:
        yield client


@pytest.fixture
def stub_bigcommerce(monkeypatch, fake_bigcommerce) -> FakeBigCommerce:
    """Route the handler's outbound calls to the in-memory API."""
    from social_proof.handlers import recent_orders_handler

    real_factory = recent_orders_handler.get_commerce_client

    def factory(**kwargs):
        return real_factory(transport=fake_bigcommerce.transport, **kwargs)

    monkeypatch.setattr(recent_orders_handler, "get_commerce_client", factory)
    return fake_bigcommerce


@pytest.fixture
def api_gateway_event():
    """Build a sample API Gateway proxy event."""

    def build(method: str = "GET", query: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        return {
            "resource": "/recent-orders",
            "path": "/recent-orders",
            "httpMethod": method,
            "headers": {"Accept": "application/json", "Origin": "https://shop.example.com"},
            "queryStringParameters": query,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "stage": "test",
                "httpMethod": method,
            },
            "body": None,
            "isBase64Encoded": False,
        }

    return build


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "recent-orders"
    context.function_version = "$LATEST"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:recent-orders"
    context.memory_limit_in_mb = 128
    context.aws_request_id = "test-lambda-request-id"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
