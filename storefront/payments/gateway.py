"""
Payment gateway interface and the Stripe Checkout implementation.

The rest of the app only sees PaymentGateway, so tests can pass in a fake
that records calls instead of talking to Stripe.
"""
import asyncio
from dataclasses import asdict, dataclass
from typing import Any, List, Optional, Protocol

import stripe

from storefront.errors import ProviderError
from storefront.logging import get_logger, sanitize_id_for_logging

logger = get_logger(__name__)


@dataclass(frozen=True)
class PaymentSession:
    """The fields of a provider checkout session the app cares about."""
    id: str
    url: Optional[str] = None
    status: Optional[str] = None
    payment_status: Optional[str] = None
    amount_total: Optional[int] = None
    currency: Optional[str] = None
    customer_email: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


class PaymentGateway(Protocol):
    async def create_session(
        self, line_items: List[dict], success_url: str, cancel_url: str
    ) -> PaymentSession:
        ...

    async def retrieve_session(self, session_id: str) -> PaymentSession:
        ...


def _to_payment_session(obj: Any) -> PaymentSession:
    details = getattr(obj, "customer_details", None)
    return PaymentSession(
        id=getattr(obj, "id"),
        url=getattr(obj, "url", None),
        status=getattr(obj, "status", None),
        payment_status=getattr(obj, "payment_status", None),
        amount_total=getattr(obj, "amount_total", None),
        currency=getattr(obj, "currency", None),
        customer_email=getattr(details, "email", None) if details else None,
    )


class StripeGateway:
    """
    Stripe Checkout gateway.

    The SDK is blocking, so each call runs in a worker thread. There is
    exactly one attempt per call: creating a checkout session has side
    effects on Stripe's side and must not be retried blindly.
    """

    def __init__(self, secret_key: str):
        if not secret_key:
            raise ValueError("Stripe secret key is required")
        self._secret_key = secret_key

    def _create(self, line_items: List[dict], success_url: str, cancel_url: str):
        return stripe.checkout.Session.create(
            api_key=self._secret_key,
            mode="payment",
            payment_method_types=["card"],
            line_items=line_items,
            success_url=success_url,
            cancel_url=cancel_url,
        )

    def _retrieve(self, session_id: str):
        return stripe.checkout.Session.retrieve(session_id, api_key=self._secret_key)

    async def create_session(
        self, line_items: List[dict], success_url: str, cancel_url: str
    ) -> PaymentSession:
        try:
            obj = await asyncio.to_thread(self._create, line_items, success_url, cancel_url)
        except stripe.StripeError as e:
            logger.debug("Stripe checkout session creation failed: %s", e.user_message or e)
            raise ProviderError() from e
        session = _to_payment_session(obj)
        logger.info("Created Stripe checkout session %s", sanitize_id_for_logging(session.id))
        return session

    async def retrieve_session(self, session_id: str) -> PaymentSession:
        try:
            obj = await asyncio.to_thread(self._retrieve, session_id)
        except stripe.StripeError as e:
            logger.debug(
                "Stripe checkout session %s lookup failed: %s",
                sanitize_id_for_logging(session_id),
                e.user_message or e,
            )
            raise ProviderError() from e
        return _to_payment_session(obj)
