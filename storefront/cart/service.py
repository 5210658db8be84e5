"""Cart manager operating on server-side sessions."""
from typing import Any, Mapping, Optional

from storefront.catalog import Catalog
from storefront.logging import get_logger, sanitize_id_for_logging
from storefront.sessions import Session
from .models import CartItem, Cart

logger = get_logger(__name__)

CART_SESSION_KEY = "cart"


def parse_quantity(raw: Any, fallback: int = 1) -> int:
    """
    Coerce user input to a quantity >= 1.

    Accepts ints and integer strings (surrounding whitespace allowed).
    Anything else (non-numeric text, fractions, booleans, None, zero or
    negative numbers) returns ``fallback``, itself clamped to at least 1.

        >>> parse_quantity("3")
        3
        >>> parse_quantity("abc")
        1
        >>> parse_quantity("-5", fallback=4)
        4
    """
    fallback = fallback if isinstance(fallback, int) and not isinstance(fallback, bool) and fallback >= 1 else 1

    if isinstance(raw, bool) or raw is None:
        return fallback
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            return fallback
        value = int(raw)
    elif isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            return fallback
    else:
        return fallback

    return value if value >= 1 else fallback


def recalc_total(cart: Cart) -> int:
    """Recompute and store ``cart.total_cents``; returns the new total."""
    cart.total_cents = sum(item.product.price_cents * item.quantity for item in cart.items)
    return cart.total_cents


class CartManager:
    """
    Cart operations for the session-scoped cart.

    The session is passed in explicitly; the manager itself holds no
    per-client state, only the catalog used to resolve product ids.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def get_or_create(self, session: Session) -> Cart:
        """Return the session's cart, creating an empty one on first access."""
        cart = session.data.get(CART_SESSION_KEY)
        if not isinstance(cart, Cart):
            cart = Cart()
            session.data[CART_SESSION_KEY] = cart
            session.mark_modified()
        return cart

    def add(self, cart: Cart, product_id: str, quantity: Any = 1) -> Cart:
        """
        Add ``quantity`` units of a product.

        Raises NotFoundError for unknown product ids. An existing line for
        the product is incremented instead of adding a second line.
        """
        product = self.catalog.get(product_id)
        qty = parse_quantity(quantity, 1)

        existing = cart.find(product.id)
        if existing:
            existing.quantity += qty
        else:
            cart.items.append(CartItem(product=product, quantity=qty))

        recalc_total(cart)
        logger.debug("Added %s x%s, cart total %s", product.id, qty, cart.total_cents)
        return cart

    def update(
        self,
        cart: Cart,
        remove_id: Optional[str] = None,
        quantities: Optional[Mapping[str, Any]] = None,
    ) -> Cart:
        """
        Remove one line, or overwrite quantities from a map.

        When ``remove_id`` is given the quantity map is ignored entirely.
        Invalid quantities keep the line's current quantity.
        """
        if remove_id:
            cart.items = [item for item in cart.items if item.product_id != remove_id]
        elif quantities:
            for item in cart.items:
                if item.product_id in quantities:
                    item.quantity = parse_quantity(quantities[item.product_id], item.quantity)

        recalc_total(cart)
        return cart

    def clear(self, session: Session) -> None:
        """Discard the session's cart."""
        if session.data.pop(CART_SESSION_KEY, None) is not None:
            session.mark_modified()
            logger.info("Cleared cart for session %s", sanitize_id_for_logging(session.id))

    def summary(self, cart: Cart) -> dict:
        """Cart document with a freshly recomputed total."""
        recalc_total(cart)
        return cart.to_dict()
