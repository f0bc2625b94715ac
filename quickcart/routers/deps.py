"""
Shared Dependencies for Routers

The application owns one AppState (created in the lifespan handler and kept
on app.state); routes receive it through Depends(get_app_state).
"""
from fastapi import HTTPException, Request

from quickcart.cart import AppState
from quickcart.errors import ERROR_STATE_NOT_READY


def get_app_state(request: Request) -> AppState:
    """Resolve the storefront state attached to the running application."""
    state = getattr(request.app.state, "quickcart", None)
    if state is None:
        raise HTTPException(status_code=503, detail=ERROR_STATE_NOT_READY)
    return state
