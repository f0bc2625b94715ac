"""FastAPI routers for the storefront API."""
from .cart import router as cart_router
from .catalog import router as catalog_router
from .deps import get_app_state
from .session import router as session_router

__all__ = ["cart_router", "catalog_router", "get_app_state", "session_router"]
