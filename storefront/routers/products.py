"""
Products Router

Public catalog endpoints.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from storefront.catalog import Catalog
from storefront.config import Settings
from storefront.money import format_cents
from .deps import get_catalog, get_settings

router = APIRouter(tags=["products"])


def _product_view(product) -> dict:
    data = product.to_dict()
    data["price_display"] = format_cents(product.price_cents, product.currency)
    return data


@router.get("/")
async def index():
    return RedirectResponse("/products", status_code=302)


@router.get("/products")
async def list_products(
    catalog: Catalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Full catalog in catalog order."""
    return {
        "products": [_product_view(p) for p in catalog.list()],
        "payments_enabled": settings.payments_enabled,
    }


@router.get("/products/{product_id}")
async def get_product(product_id: str, catalog: Catalog = Depends(get_catalog)):
    """Single product, 404 if the id is unknown."""
    return _product_view(catalog.get(product_id))
