"""Cart package: models and session-scoped cart manager."""
from .models import CartItem, Cart
from .service import CartManager, parse_quantity, recalc_total

__all__ = [
    "CartItem",
    "Cart",
    "CartManager",
    "parse_quantity",
    "recalc_total",
]
