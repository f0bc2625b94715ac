"""
Session Router

The identity provider runs client-side; the client forwards its current user
object here whenever it changes, and reads the full context value back.
"""
from fastapi import APIRouter, Depends

from quickcart.cart import AppState
from .deps import get_app_state
from .models import SessionRequest

router = APIRouter(tags=["session"])


@router.post("/session")
async def update_session(request: SessionRequest, state: AppState = Depends(get_app_state)):
    """Record the signed-in user (or sign-out) and return the seller flag."""
    state.set_user(request.user)
    return {
        "user_id": state.user.id if state.user else None,
        "is_seller": state.is_seller,
    }


@router.get("/context")
async def get_context(state: AppState = Depends(get_app_state)):
    """Everything the storefront renders from."""
    return state.snapshot()
