"""
Cart Router

Every mutation answers with a 303 redirect back to the cart view.
Bodies are JSON only (`application/json`); form-encoded posts are
rejected with 422 by the central error renderer.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from storefront.cart import CartManager
from storefront.sessions import Session
from .deps import get_cart_manager, get_session
from .models import AddToCartRequest, UpdateCartRequest

router = APIRouter(prefix="/cart", tags=["cart"])

CART_PATH = "/cart"


def _back_to_cart() -> RedirectResponse:
    return RedirectResponse(CART_PATH, status_code=303)


@router.get("")
async def view_cart(
    session: Session = Depends(get_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    cart = cart_manager.get_or_create(session)
    return cart_manager.summary(cart)


@router.post("/add")
async def add_to_cart(
    request: AddToCartRequest,
    session: Session = Depends(get_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    cart = cart_manager.get_or_create(session)
    cart_manager.add(cart, request.product_id, request.quantity)
    return _back_to_cart()


@router.post("/update")
async def update_cart(
    request: UpdateCartRequest,
    session: Session = Depends(get_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    cart = cart_manager.get_or_create(session)
    cart_manager.update(cart, remove_id=request.remove, quantities=request.quantities)
    return _back_to_cart()


@router.post("/clear")
async def clear_cart(
    session: Session = Depends(get_session),
    cart_manager: CartManager = Depends(get_cart_manager),
):
    cart_manager.clear(session)
    return _back_to_cart()
