"""Payment provider integration."""
from .gateway import PaymentGateway, PaymentSession, StripeGateway
from .checkout import CheckoutService, build_line_items, checkout_urls

__all__ = [
    "PaymentGateway",
    "PaymentSession",
    "StripeGateway",
    "CheckoutService",
    "build_line_items",
    "checkout_urls",
]
