"""
Shared dependencies for routers.

Services are created by the app factory and stored on ``app.state``;
these helpers hand them to endpoints so tests can override them.
"""
from fastapi import Request

from storefront.cart import CartManager
from storefront.catalog import Catalog
from storefront.config import Settings
from storefront.payments import CheckoutService
from storefront.sessions import Session


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_cart_manager(request: Request) -> CartManager:
    return request.app.state.cart_manager


def get_checkout_service(request: Request) -> CheckoutService:
    return request.app.state.checkout_service


def get_session(request: Request) -> Session:
    """Session attached by SessionMiddleware."""
    session = getattr(request.state, "session", None)
    if session is None:
        raise RuntimeError("SessionMiddleware is not installed")
    return session


def public_base_url(request: Request) -> str:
    """Base URL for provider redirects: PUBLIC_BASE_URL or the request's own."""
    settings = get_settings(request)
    if settings.public_base_url:
        return settings.public_base_url
    return str(request.base_url).rstrip("/")
