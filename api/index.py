"""
QuickCart Storefront - Main FastAPI Application

Single entry point for the storefront API. The lifespan handler builds the
AppState once, starts the catalog/user fetch in the background and tears the
state down on shutdown.
"""
import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quickcart.cart import AppState, FileStorage, MemoryStorage
from quickcart.config import Settings, get_settings
from quickcart.logging import get_logger
from quickcart.routers import cart_router, catalog_router, session_router

logger = get_logger(__name__)


def build_state(settings: Settings) -> AppState:
    """Wire an AppState from settings (file storage when a path is configured)."""
    storage = FileStorage(settings.storage_path) if settings.storage_path else MemoryStorage()
    return AppState(settings, storage=storage)


# ==================== FASTAPI APP ====================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Startup
    state = build_state(get_settings())
    app.state.quickcart = state
    # Don't block startup on the catalog endpoint (it may be this very app)
    mount_task = asyncio.create_task(state.mount())
    logger.info(f"Storefront state ready, currency={state.currency}")

    yield

    # Shutdown
    state.unmount()
    if not mount_task.done():
        mount_task.cancel()
        try:
            await mount_task
        except asyncio.CancelledError:
            pass
    await state.aclose()
    app.state.quickcart = None


app = FastAPI(
    title="QuickCart Storefront",
    description="Catalog and shopping-cart state for the QuickCart storefront",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(catalog_router, prefix="/api")
app.include_router(cart_router, prefix="/api")
app.include_router(session_router, prefix="/api")


# ==================== HEALTH CHECK ====================

@app.get("/api/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "quickcart"}
