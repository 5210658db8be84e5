"""
Request models for the storefront endpoints.

Quantities are deliberately loose (``Any``): invalid input is coerced by
the cart layer instead of being rejected with a 422.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class AddToCartRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    quantity: Any = 1


class UpdateCartRequest(BaseModel):
    quantities: Optional[Dict[str, Any]] = None
    remove: Optional[str] = None
