"""Pytest configuration and fixtures"""
import os

import httpx
import pytest

from quickcart.cart import AppState, MemoryStorage
from quickcart.catalog import CatalogClient
from quickcart.config import Settings

# Set test environment variables
os.environ.setdefault("LOG_LEVEL", "WARNING")

PRODUCTS_URL = "http://catalog.test/api/products"


def make_catalog_client(handler) -> CatalogClient:
    """CatalogClient whose requests are answered by handler(request)."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CatalogClient(PRODUCTS_URL, http_client=http_client)


def failing_handler(request: httpx.Request) -> httpx.Response:
    """Products endpoint that is down."""
    return httpx.Response(503, json={"error": "unavailable"})


@pytest.fixture
def settings():
    """Settings pointing at the mocked products endpoint"""
    return Settings(currency="$", products_url=PRODUCTS_URL)


@pytest.fixture
def storage():
    """Empty in-memory storage"""
    return MemoryStorage()


@pytest.fixture
def app_state(settings, storage):
    """AppState whose catalog endpoint always fails (seed fallback)"""
    return AppState(settings, storage=storage, catalog_client=make_catalog_client(failing_handler))


@pytest.fixture
def sample_live_products():
    """Live endpoint body using the storefront API's field names"""
    return {
        "products": [
            {
                "_id": "a1",
                "name": "Studio Monitor",
                "description": "Nearfield, 5-inch woofer",
                "rating": 4.2,
                "offerPrice": 10.005,
                "image_url": "https://cdn.example.com/a1.png",
            },
            {
                "_id": "b2",
                "name": "Desk Mic",
                "description": "USB-C condenser",
                "rating": 4.0,
                "offerPrice": "$59.50",
            },
        ]
    }


@pytest.fixture
def seller_user():
    """Identity provider user with the seller role claim"""
    return {
        "id": "user_seller_1",
        "firstName": "Sam",
        "email": "sam@example.com",
        "publicMetadata": {"role": "seller"},
    }


@pytest.fixture
def buyer_user():
    """Identity provider user without a role claim"""
    return {
        "id": "user_buyer_1",
        "firstName": "Bea",
        "publicMetadata": {},
    }
