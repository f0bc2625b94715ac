"""
Catalog Router

GET /products is the products endpoint itself, served from the seed catalog.
/catalog/refresh re-runs the state's fetch, which may hit a remote endpoint.
"""
from fastapi import APIRouter, Depends

from quickcart.cart import AppState
from quickcart.catalog import get_seed_products
from .deps import get_app_state

router = APIRouter(tags=["catalog"])


@router.get("/products")
async def list_products():
    """Products endpoint: {"products": [...]}."""
    return {"products": [product.model_dump(mode="json") for product in get_seed_products()]}


@router.post("/catalog/refresh")
async def refresh_catalog(state: AppState = Depends(get_app_state)):
    """Fetch the catalog now and report where it came from."""
    await state.fetch_product_data()
    return {
        "source": state.catalog_source,
        "count": len(state.products),
        "cart": state.cart_summary(),
    }
