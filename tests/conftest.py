import os
from typing import Generator

# Override settings for tests before importing app modules
os.environ["BASE_URL"] = "https://shop.example.com"
os.environ["PAYPAL_BUSINESS"] = "biz@example.com"
os.environ["PAYPAL_ENV"] = "sandbox"
os.environ["CORS_ORIGINS"] = "http://localhost:3000"

import pytest
from fastapi.testclient import TestClient

from webcheckout.main import app
from webcheckout.models import CallbackUrls, MerchantConfig, OrderContext, OrderItem


class StaticUrlResolver:
    """Resolver returning fixed URLs built from the order id."""

    def __init__(self, base_submit_url: str = "https://paypal.example/cgi-bin"):
        self.base_submit_url = base_submit_url
        self.calls: list[str] = []

    def urls_for(self, order_id: str) -> CallbackUrls:
        self.calls.append(order_id)
        return CallbackUrls(
            return_url=f"https://x/return/{order_id}",
            cancel_url=f"https://x/cancel/{order_id}",
            notify_url=f"https://x/notify/{order_id}",
            base_submit_url=self.base_submit_url,
        )


@pytest.fixture
def resolver() -> StaticUrlResolver:
    return StaticUrlResolver()


@pytest.fixture
def merchant() -> MerchantConfig:
    return MerchantConfig(business_id="biz@example.com", environment="sandbox")


@pytest.fixture
def order() -> OrderContext:
    return OrderContext(
        order_id="ORD-1",
        amount_minor_units=2599,
        currency_code="USD",
        items=(OrderItem(name="Book"),),
    )


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create a test client with the dependency overrides cleared afterwards."""
    yield TestClient(app)
    app.dependency_overrides.clear()
