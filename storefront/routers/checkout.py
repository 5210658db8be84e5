"""
Checkout Router

Hands the cart to the payment provider and renders the pages the
provider redirects back to.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from storefront.cart import CartManager
from storefront.logging import get_logger
from storefront.payments import CheckoutService, checkout_urls
from storefront.sessions import Session
from .cart import CART_PATH
from .deps import get_cart_manager, get_checkout_service, get_session, public_base_url

logger = get_logger(__name__)

router = APIRouter(tags=["checkout"])


@router.post("/checkout")
async def create_checkout(
    request: Request,
    session: Session = Depends(get_session),
    cart_manager: CartManager = Depends(get_cart_manager),
    checkout: CheckoutService = Depends(get_checkout_service),
):
    """303 to the hosted payment page, or back to the cart if it is empty."""
    cart = cart_manager.get_or_create(session)
    success_url, cancel_url = checkout_urls(public_base_url(request))

    url = await checkout.create_checkout(cart, success_url, cancel_url)
    if url is None:
        return RedirectResponse(CART_PATH, status_code=303)
    return RedirectResponse(url, status_code=303)


@router.get("/success")
async def checkout_success(
    session_id: Optional[str] = None,
    checkout: CheckoutService = Depends(get_checkout_service),
):
    payment_session = await checkout.get_confirmation(session_id)
    return {"session": payment_session.to_dict() if payment_session else None}


@router.get("/cancel")
async def checkout_cancel():
    return {
        "status": "cancelled",
        "message": "Checkout was cancelled. Your cart has been kept.",
    }
