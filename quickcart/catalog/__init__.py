"""Catalog package: seed data and products endpoint client."""
from .client import CatalogClient, CatalogResult, SOURCE_FALLBACK, SOURCE_LIVE
from .seed import SEED_PRODUCTS, get_seed_products

__all__ = [
    "CatalogClient",
    "CatalogResult",
    "SEED_PRODUCTS",
    "SOURCE_FALLBACK",
    "SOURCE_LIVE",
    "get_seed_products",
]
