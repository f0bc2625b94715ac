"""
Catalog Client

Fetches the product list from the products endpoint. Any failure (transport
error, non-2xx status, malformed body) yields the static seed catalog instead;
the caller never sees an error.
"""
from dataclasses import dataclass
from typing import List, Optional

import httpx
from pydantic import ValidationError

from quickcart.catalog.seed import get_seed_products
from quickcart.errors import ERROR_CATALOG_MALFORMED, ERROR_CATALOG_UNAVAILABLE
from quickcart.logging import get_logger
from quickcart.models import Product

logger = get_logger(__name__)

SOURCE_LIVE = "live"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class CatalogResult:
    """Catalog returned by a single fetch, with where it came from."""
    products: List[Product]
    source: str

    @property
    def is_fallback(self) -> bool:
        return self.source == SOURCE_FALLBACK


class CatalogClient:
    """HTTP client for the products endpoint with seed fallback."""

    def __init__(
        self,
        products_url: str,
        timeout: float = 5.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.products_url = products_url
        self.timeout = timeout
        self._http_client = http_client
        self._owns_client = http_client is None

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Lazily create the shared httpx client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout, connect=self.timeout))
        return self._http_client

    async def fetch_products(self) -> CatalogResult:
        """Fetch the live catalog, falling back to seed products on any failure."""
        client = await self._get_http_client()

        try:
            response = await client.get(self.products_url)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning(f"{ERROR_CATALOG_UNAVAILABLE}, using fallback catalog: {e}")
            return self._fallback()

        products = self._parse_products(data)
        if products is None:
            return self._fallback()

        logger.info(f"Loaded {len(products)} products from {self.products_url}")
        return CatalogResult(products=products, source=SOURCE_LIVE)

    @staticmethod
    def _parse_products(data) -> Optional[List[Product]]:
        """Validate the {"products": [...]} body; None when malformed."""
        if not isinstance(data, dict) or not isinstance(data.get("products"), list):
            logger.warning(f"{ERROR_CATALOG_MALFORMED}: expected an object with a 'products' list")
            return None

        try:
            return [Product.model_validate(record) for record in data["products"]]
        except (ValidationError, ValueError, TypeError, ArithmeticError) as e:
            logger.warning(f"{ERROR_CATALOG_MALFORMED}: {e}")
            return None

    @staticmethod
    def _fallback() -> CatalogResult:
        return CatalogResult(products=get_seed_products(), source=SOURCE_FALLBACK)

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._http_client is not None and self._owns_client:
            await self._http_client.aclose()
            self._http_client = None
