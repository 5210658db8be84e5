"""Cart models. All amounts are integer minor units."""
from dataclasses import dataclass, field
from typing import List, Optional

from storefront.catalog import Product
from storefront.money import format_cents


@dataclass
class CartItem:
    """Single line in the cart."""
    product: Product
    quantity: int

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError("quantity must be a positive integer")

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total_cents(self) -> int:
        return self.product.price_cents * self.quantity

    def to_dict(self) -> dict:
        return {
            "product_id": self.product.id,
            "name": self.product.name,
            "image": self.product.image,
            "currency": self.product.currency,
            "unit_price_cents": self.product.price_cents,
            "quantity": self.quantity,
            "line_total_cents": self.line_total_cents,
            "line_total_display": format_cents(self.line_total_cents, self.product.currency),
        }


@dataclass
class Cart:
    """
    Shopping cart held by one session.

    ``total_cents`` is a stored value: it must be recomputed with
    ``recalc_total`` after every mutation of ``items``.
    """
    items: List[CartItem] = field(default_factory=list)
    total_cents: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self.items)

    @property
    def currency(self) -> Optional[str]:
        return self.items[0].product.currency if self.items else None

    def find(self, product_id: str) -> Optional[CartItem]:
        return next((item for item in self.items if item.product_id == product_id), None)

    def to_dict(self) -> dict:
        """Cart view document."""
        currency = self.currency or "usd"
        return {
            "items": [item.to_dict() for item in self.items],
            "item_count": self.item_count,
            "total_cents": self.total_cents,
            "total_display": format_cents(self.total_cents, currency),
            "currency": currency,
            "is_empty": self.is_empty,
        }
