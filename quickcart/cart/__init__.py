"""Cart package: mapping model, snapshot storage, and application state."""
from .models import CartMapping, validate_quantity
from .service import AppState, StateChange
from .storage import CART_STORAGE_KEY, FileStorage, LocalStorage, MemoryStorage, load_cart, save_cart

__all__ = [
    "AppState",
    "CART_STORAGE_KEY",
    "CartMapping",
    "FileStorage",
    "LocalStorage",
    "MemoryStorage",
    "StateChange",
    "load_cart",
    "save_cart",
    "validate_quantity",
]
