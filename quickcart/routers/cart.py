"""
Cart Router

Cart endpoints over the injected AppState. Every response carries the
recomputed count and amount so the client never totals anything itself.
"""
from fastapi import APIRouter, Depends, HTTPException

from quickcart.cart import AppState
from quickcart.logging import get_logger
from .deps import get_app_state
from .models import AddToCartRequest, ReplaceCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


@router.get("/cart")
async def get_cart(state: AppState = Depends(get_app_state)):
    """Current cart with derived totals."""
    return state.cart_summary()


@router.post("/cart/add")
async def add_to_cart(request: AddToCartRequest, state: AppState = Depends(get_app_state)):
    """Add one unit of a product."""
    try:
        state.add_to_cart(request.product_id)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    return state.cart_summary()


@router.patch("/cart/item")
async def update_cart_item(request: UpdateCartItemRequest, state: AppState = Depends(get_app_state)):
    """Set an item's quantity (0 = remove)."""
    try:
        state.update_quantity(request.product_id, request.quantity)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    return state.cart_summary()


@router.put("/cart")
async def replace_cart(request: ReplaceCartRequest, state: AppState = Depends(get_app_state)):
    """Replace the whole cart mapping."""
    try:
        state.set_cart_items(request.items)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    return state.cart_summary()
