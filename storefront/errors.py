"""
Storefront errors.

Error messages are kept as constants so handlers and tests share them.
Every exception carries the HTTP status the central error renderer uses.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"

# Payment errors
ERROR_PROVIDER_UNCONFIGURED = "Stripe is not configured. Set STRIPE_SECRET_KEY in .env"
ERROR_PROVIDER_FAILED = "Payment provider error"

# Generic errors
ERROR_INTERNAL = "Internal Server Error"
ERROR_NOT_FOUND = "Not found"


class StorefrontError(Exception):
    """Base error rendered as ``{"status": ..., "message": ...}``."""

    status_code = 500
    default_message = ERROR_INTERNAL

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(StorefrontError):
    """Unknown product or resource id."""

    status_code = 404
    default_message = ERROR_NOT_FOUND


class ProviderUnconfiguredError(StorefrontError):
    """Payment operation attempted without provider credentials."""

    status_code = 500
    default_message = ERROR_PROVIDER_UNCONFIGURED


class ProviderError(StorefrontError):
    """The payment provider call failed (network, API or auth error)."""

    status_code = 500
    default_message = ERROR_PROVIDER_FAILED
