"""
FastAPI Routers Package

All routers are included by the app factory in api/index.py.
"""

from storefront.routers.products import router as products_router
from storefront.routers.cart import router as cart_router
from storefront.routers.checkout import router as checkout_router
from storefront.routers.health import router as health_router

__all__ = [
    "products_router",
    "cart_router",
    "checkout_router",
    "health_router",
]
