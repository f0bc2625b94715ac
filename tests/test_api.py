"""Tests for API endpoints"""
import pytest
from fastapi.testclient import TestClient

from api.index import app, build_state
from quickcart.cart import AppState, FileStorage, MemoryStorage
from quickcart.config import Settings

from conftest import failing_handler, make_catalog_client


@pytest.fixture
def client(settings):
    """Test client with a fresh storefront state injected"""
    app.state.quickcart = AppState(
        settings,
        storage=MemoryStorage(),
        catalog_client=make_catalog_client(failing_handler),
    )
    yield TestClient(app)
    app.state.quickcart = None


def test_health_check(client):
    """Test health check endpoint"""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_products(client):
    """Test the products endpoint serves the seed catalog"""
    response = client.get("/api/products")
    assert response.status_code == 200

    products = response.json()["products"]
    assert len(products) == 20
    assert products[2]["id"] == "3"
    assert products[2]["price"] == "799.99"


def test_add_and_update_cart(client):
    """Test add, add, set to zero through the API"""
    response = client.post("/api/cart/add", json={"product_id": "2"})
    assert response.status_code == 200
    assert response.json()["items"] == {"2": 1}

    response = client.post("/api/cart/add", json={"product_id": 2})
    assert response.json()["count"] == 2

    response = client.patch("/api/cart/item", json={"product_id": "2", "quantity": 0})
    assert response.status_code == 200
    assert response.json()["items"] == {}
    assert response.json()["count"] == 0


def test_negative_quantity_rejected(client):
    """Test request validation rejects negative quantity"""
    response = client.patch("/api/cart/item", json={"product_id": "2", "quantity": -1})
    assert response.status_code == 422


def test_invalid_product_id_rejected(client):
    """Test state validation surfaces as 400"""
    response = client.post("/api/cart/add", json={"product_id": "bad id!"})
    assert response.status_code == 400


def test_replace_cart(client):
    response = client.put("/api/cart", json={"items": {"3": 2, "4": 0}})
    assert response.status_code == 200
    assert response.json()["items"] == {"3": 2}


def test_refresh_catalog_uses_fallback(client):
    """Test catalog refresh with the endpoint down, then the cart amount"""
    client.put("/api/cart", json={"items": {"3": 2}})

    response = client.post("/api/catalog/refresh")
    assert response.status_code == 200

    data = response.json()
    assert data["source"] == "fallback"
    assert data["count"] == 20
    assert data["cart"]["amount"] == 1599.98
    assert data["cart"]["amount_display"] == "$1,599.98"


def test_session_seller_flag(client):
    """Test sign in as seller, then sign out"""
    response = client.post(
        "/api/session",
        json={"user": {"id": "user_1", "publicMetadata": {"role": "seller"}}},
    )
    assert response.status_code == 200
    assert response.json() == {"user_id": "user_1", "is_seller": True}

    response = client.post("/api/session", json={"user": None})
    assert response.json() == {"user_id": None, "is_seller": False}


def test_context_snapshot(client):
    """Test the context value contains everything the storefront renders"""
    client.post("/api/cart/add", json={"product_id": "5"})

    data = client.get("/api/context").json()

    assert data["currency"] == "$"
    assert data["is_seller"] is False
    assert data["products"] == []
    assert data["cart"]["items"] == {"5": 1}
    assert data["cart"]["amount"] == 0.0


def test_state_not_ready():
    """Test endpoints answer 503 before the state exists"""
    app.state.quickcart = None
    response = TestClient(app).get("/api/cart")
    assert response.status_code == 503


def test_build_state_storage_choice(tmp_path):
    """Test file storage is used only when a path is configured"""
    assert isinstance(build_state(Settings()).storage, MemoryStorage)

    state = build_state(Settings(storage_path=str(tmp_path / "storage.json")))
    assert isinstance(state.storage, FileStorage)
