"""
Application configuration.

Values come from the process environment; a local .env file is loaded first
when present so development runs don't need exported variables.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

DEFAULT_CURRENCY = "$"
DEFAULT_PRODUCTS_URL = "http://localhost:8000/api/products"
DEFAULT_FETCH_TIMEOUT = 5.0


@dataclass(frozen=True)
class Settings:
    """Read-only runtime settings."""
    currency: str = DEFAULT_CURRENCY
    products_url: str = DEFAULT_PRODUCTS_URL
    storage_path: Optional[str] = None  # None = in-memory storage
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        timeout_raw = os.environ.get("QUICKCART_FETCH_TIMEOUT", "")
        try:
            fetch_timeout = float(timeout_raw) if timeout_raw else DEFAULT_FETCH_TIMEOUT
        except ValueError:
            fetch_timeout = DEFAULT_FETCH_TIMEOUT

        return cls(
            currency=os.environ.get("QUICKCART_CURRENCY", "").strip() or DEFAULT_CURRENCY,
            products_url=os.environ.get("QUICKCART_PRODUCTS_URL", "").strip() or DEFAULT_PRODUCTS_URL,
            storage_path=os.environ.get("QUICKCART_STORAGE_PATH", "").strip() or None,
            fetch_timeout=fetch_timeout,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process."""
    load_dotenv()
    return Settings.from_env()
