"""Checkout: cart -> provider payment session -> redirect URL."""
from typing import List, Optional, Tuple

from storefront.cart.models import Cart
from storefront.errors import ProviderError, ProviderUnconfiguredError
from storefront.logging import get_logger, sanitize_id_for_logging
from .gateway import PaymentGateway, PaymentSession

logger = get_logger(__name__)

# Stripe substitutes the real id into this placeholder on redirect
CHECKOUT_SESSION_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"


def checkout_urls(base_url: str) -> Tuple[str, str]:
    """Return (success_url, cancel_url) for a public base URL."""
    base = base_url.rstrip("/")
    return f"{base}/success?session_id={CHECKOUT_SESSION_PLACEHOLDER}", f"{base}/cancel"


def build_line_items(cart: Cart) -> List[dict]:
    """Map cart lines to provider line items (amounts in minor units)."""
    return [
        {
            "price_data": {
                "currency": item.product.currency,
                "product_data": {"name": item.product.name},
                "unit_amount": item.product.price_cents,
            },
            "quantity": item.quantity,
        }
        for item in cart.items
    ]


class CheckoutService:
    """Checkout operations. ``gateway`` is None when payments are not configured."""

    def __init__(self, gateway: Optional[PaymentGateway] = None):
        self.gateway = gateway

    @property
    def configured(self) -> bool:
        return self.gateway is not None

    async def create_checkout(self, cart: Cart, success_url: str, cancel_url: str) -> Optional[str]:
        """
        Create a hosted payment page for the cart.

        Returns the provider URL to redirect to, or None for an empty cart
        (no provider call is made). Raises ProviderUnconfiguredError when no
        gateway is set; provider failures propagate as ProviderError.
        """
        if not self.configured:
            raise ProviderUnconfiguredError()
        if cart.is_empty:
            return None

        session = await self.gateway.create_session(build_line_items(cart), success_url, cancel_url)
        if not session.url:
            logger.error("Checkout session %s has no URL", sanitize_id_for_logging(session.id))
            raise ProviderError()
        return session.url

    async def get_confirmation(self, session_id: Optional[str]) -> Optional[PaymentSession]:
        """Look up a finished checkout; None when there is nothing to look up."""
        if not self.configured or not session_id or not session_id.strip():
            return None
        return await self.gateway.retrieve_session(session_id.strip())
