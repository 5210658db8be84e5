"""Pytest configuration and fixtures"""
import os
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

# Set test environment before the app module is imported anywhere
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.pop("STRIPE_SECRET_KEY", None)

from api.index import create_app  # noqa: E402
from storefront.cart import CartManager  # noqa: E402
from storefront.catalog import Catalog, Product  # noqa: E402
from storefront.config import Settings  # noqa: E402
from storefront.errors import ProviderError  # noqa: E402
from storefront.payments import PaymentSession  # noqa: E402
from storefront.sessions import InMemorySessionStore  # noqa: E402


class FakeGateway:
    """Records calls instead of talking to a payment provider."""

    def __init__(self, url: str = "https://pay.example.test/cs_test_123", fail: bool = False):
        self.url = url
        self.fail = fail
        self.created: List[dict] = []
        self.retrieved: List[str] = []
        self.sessions = {}

    async def create_session(self, line_items, success_url, cancel_url) -> PaymentSession:
        self.created.append(
            {"line_items": line_items, "success_url": success_url, "cancel_url": cancel_url}
        )
        if self.fail:
            raise ProviderError()
        return PaymentSession(id="cs_test_123", url=self.url, status="open")

    async def retrieve_session(self, session_id: str) -> PaymentSession:
        self.retrieved.append(session_id)
        if self.fail:
            raise ProviderError()
        return self.sessions.get(
            session_id,
            PaymentSession(
                id=session_id,
                status="complete",
                payment_status="paid",
                amount_total=12999,
                currency="usd",
                customer_email="buyer@example.com",
            ),
        )


@pytest.fixture
def products():
    """Small test catalog"""
    return [
        Product(id="a", name="Alpha", description="First", price_cents=1000, currency="usd", image="/images/a.jpg"),
        Product(id="b", name="Beta", description="Second", price_cents=250, currency="usd", image="/images/b.jpg"),
        Product(id="c", name="Gamma", description="Third", price_cents=0, currency="usd", image="/images/c.jpg"),
    ]


@pytest.fixture
def catalog(products):
    return Catalog(products)


@pytest.fixture
def cart_manager(catalog):
    return CartManager(catalog)


@pytest.fixture
def session_store():
    return InMemorySessionStore(ttl_seconds=60)


@pytest.fixture
def session(session_store):
    return session_store.new()


@pytest.fixture
def settings():
    return Settings(session_secret="test-session-secret", environment="test")


@pytest.fixture
def fake_gateway():
    return FakeGateway()


def _client(settings, catalog, gateway=None, **kwargs) -> TestClient:
    app = create_app(settings=settings, catalog=catalog, gateway=gateway)
    return TestClient(app, follow_redirects=False, **kwargs)


@pytest.fixture
def client(settings, catalog):
    """Client for an app without payments configured"""
    return _client(settings, catalog)


@pytest.fixture
def paying_client(settings, catalog, fake_gateway):
    """Client for an app with a fake payment gateway"""
    return _client(settings, catalog, fake_gateway)


@pytest.fixture
def make_client(settings, catalog):
    def factory(gateway: Optional[object] = None, **kwargs) -> TestClient:
        return _client(settings, catalog, gateway, **kwargs)
    return factory
