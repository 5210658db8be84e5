"""
Storefront - Main FastAPI Application

Catalog, session cart and Stripe Checkout behind a single app factory.

Run locally:
    uvicorn api.index:app --reload --port 4242
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.cart import CartManager
from storefront.catalog import Catalog, default_catalog
from storefront.config import SESSION_COOKIE_NAME, Settings
from storefront.errors import ERROR_INTERNAL, StorefrontError
from storefront.logging import get_logger
from storefront.middleware import RequestLoggingMiddleware
from storefront.payments import CheckoutService, PaymentGateway, StripeGateway
from storefront.routers import cart_router, checkout_router, health_router, products_router
from storefront.sessions import InMemorySessionStore, SessionMiddleware

logger = get_logger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


def _error_response(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"status": status, "message": message})


def _register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Funnel every error into one renderer that only exposes status and message."""

    def log_failure(request: Request, exc: Exception) -> None:
        if settings.is_test:
            return
        logger.error(
            "Unhandled error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        if exc.status_code >= 500:
            log_failure(request, exc)
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(422, "Invalid request")

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log_failure(request, exc)
        return _error_response(500, ERROR_INTERNAL)


def create_app(
    settings: Optional[Settings] = None,
    catalog: Optional[Catalog] = None,
    gateway: Optional[PaymentGateway] = None,
    session_store: Optional[InMemorySessionStore] = None,
) -> FastAPI:
    """
    Build the application.

    ``gateway`` defaults to Stripe when STRIPE_SECRET_KEY is set; without
    either, payment endpoints answer 500 and the rest of the shop works.
    """
    settings = settings or Settings.from_env()
    catalog = catalog or default_catalog()
    if gateway is None and settings.payments_enabled:
        gateway = StripeGateway(settings.stripe_secret_key)
    store = session_store or InMemorySessionStore(ttl_seconds=settings.session_ttl_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Storefront ready with %d products", len(catalog))
        if gateway is None:
            logger.warning("STRIPE_SECRET_KEY is not set. Set it in .env to enable payments.")
        yield

    app = FastAPI(
        title="Storefront",
        description="Product catalog, session cart and hosted checkout",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.catalog = catalog
    app.state.cart_manager = CartManager(catalog)
    app.state.checkout_service = CheckoutService(gateway)
    app.state.session_store = store

    # Last added runs first: access log wraps the session layer
    app.add_middleware(
        SessionMiddleware,
        store=store,
        secret=settings.session_secret,
        cookie_name=SESSION_COOKIE_NAME,
        secure=settings.session_cookie_secure,
    )
    app.add_middleware(RequestLoggingMiddleware)

    _register_error_handlers(app, settings)

    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)

    images_dir = PUBLIC_DIR / "images"
    if images_dir.exists():
        app.mount("/images", StaticFiles(directory=str(images_dir)), name="images")

    return app


app = create_app()
