"""
Storefront application state.

One AppState per storefront session holds the cart, the catalog and the
signed-in user. The presentation layer reads it, calls its mutators and
subscribes to change notifications; nothing here is a module-level singleton.
"""
import asyncio
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Union

from quickcart.auth.identity import PLACEHOLDER_USER_DATA, coerce_identity_user, is_seller
from quickcart.catalog.client import CatalogClient
from quickcart.config import Settings
from quickcart.logging import get_logger, sanitize_id_for_logging
from quickcart.models import IdentityUser, Product, UserData, product_id
from quickcart.services.money import floor_money, format_money, multiply, to_float

from .models import CartMapping, validate_quantity
from .storage import CART_STORAGE_KEY, LocalStorage, MemoryStorage, load_cart, save_cart

logger = get_logger(__name__)


class StateChange(str, Enum):
    """What changed in a notification."""
    CART = "cart"
    PRODUCTS = "products"
    USER = "user"
    USER_DATA = "user_data"
    SELLER = "seller"


Subscriber = Callable[[StateChange, "AppState"], None]


class AppState:
    """
    Cart, catalog and user state for one storefront session.

    The cart is rehydrated from storage on construction and written back on
    every mutation. Derived values (count, amount) are recomputed on each
    call from the current cart and catalog.
    """

    def __init__(
        self,
        settings: Settings,
        storage: Optional[LocalStorage] = None,
        catalog_client: Optional[CatalogClient] = None,
        storage_key: str = CART_STORAGE_KEY,
    ):
        self.settings = settings
        self.storage = storage if storage is not None else MemoryStorage()
        self.catalog_client = catalog_client or CatalogClient(
            settings.products_url, timeout=settings.fetch_timeout
        )
        self.storage_key = storage_key

        self._cart = load_cart(self.storage, storage_key)
        self._products: List[Product] = []
        self._catalog_source: Optional[str] = None
        self._user: Optional[IdentityUser] = None
        self._user_data: Optional[UserData] = None
        self._is_seller = False

        self._subscribers: List[Subscriber] = []
        self._active = True
        self._products_generation = 0

    # ==================== READ-ONLY STATE ====================

    @property
    def currency(self) -> str:
        return self.settings.currency

    @property
    def cart_items(self) -> CartMapping:
        return self._cart

    @property
    def products(self) -> List[Product]:
        return list(self._products)

    @property
    def catalog_source(self) -> Optional[str]:
        """Catalog origin: "live" or "fallback"; None until a fetch resolves."""
        return self._catalog_source

    @property
    def user(self) -> Optional[IdentityUser]:
        return self._user

    @property
    def user_data(self) -> Optional[UserData]:
        return self._user_data

    @property
    def is_seller(self) -> bool:
        return self._is_seller

    @property
    def is_active(self) -> bool:
        """False after unmount() until the next mount()."""
        return self._active

    # ==================== SUBSCRIPTIONS ====================

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a change listener. Returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, change: StateChange) -> None:
        for callback in list(self._subscribers):
            try:
                callback(change, self)
            except Exception:
                logger.exception(f"Subscriber failed on {change.value} change")

    # ==================== CART ====================

    def _commit_cart(self, cart: CartMapping) -> None:
        self._cart = cart
        save_cart(self.storage, cart, self.storage_key)
        self._notify(StateChange.CART)

    def add_to_cart(self, item_id: Union[str, int]) -> None:
        """Add one unit of item_id, inserting it at quantity 1 if absent."""
        pid = product_id(item_id)
        self._commit_cart(self._cart.incremented(pid))
        logger.debug(f"Added {sanitize_id_for_logging(pid)} to cart")

    def update_quantity(self, item_id: Union[str, int], quantity: int) -> None:
        """
        Set the quantity of item_id; 0 removes the entry.

        Raises:
            ValueError: for an invalid id or a negative / non-integer quantity.
                State and storage are left untouched.
        """
        pid = product_id(item_id)
        validate_quantity(quantity)
        self._commit_cart(self._cart.with_quantity(pid, quantity))

    def set_cart_items(self, items: Mapping) -> None:
        """Replace the whole cart. Zero quantities are dropped."""
        cart = items if isinstance(items, CartMapping) else CartMapping(items)
        self._commit_cart(cart)

    def get_cart_count(self) -> int:
        """Total units in the cart."""
        return self._cart.total_quantity

    def get_cart_amount(self) -> Decimal:
        """
        Sum of quantity x unit price, floored to the cent.

        Entries whose product isn't in the loaded catalog (catalog not loaded
        yet, product withdrawn) are skipped.
        """
        prices: Dict[str, Decimal] = {}
        for product in self._products:
            prices.setdefault(product.id, product.price)

        total = Decimal("0")
        for item_id, quantity in self._cart.items():
            price = prices.get(item_id)
            if price is None:
                logger.debug(f"Skipping {sanitize_id_for_logging(item_id)}: not in catalog")
                continue
            total += multiply(price, quantity)
        return floor_money(total)

    # ==================== CATALOG & USER DATA ====================

    async def fetch_product_data(self) -> None:
        """
        Replace the catalog with the live one, or the seed fallback on failure.

        A result that arrives after unmount() or after a newer fetch has
        started is discarded.
        """
        self._products_generation += 1
        generation = self._products_generation

        result = await self.catalog_client.fetch_products()

        if generation != self._products_generation or not self._active:
            logger.debug("Discarding stale catalog result")
            return

        self._products = list(result.products)
        self._catalog_source = result.source
        self._notify(StateChange.PRODUCTS)

    async def fetch_user_data(self) -> None:
        """Load profile data. Static placeholder until a profile source exists."""
        if not self._active:
            return

        self._user_data = PLACEHOLDER_USER_DATA.model_copy()
        self._notify(StateChange.USER_DATA)

    # ==================== IDENTITY ====================

    def set_user(self, user: Union[IdentityUser, dict, None]) -> None:
        """
        Record the identity provider's current user.

        The seller flag is recomputed only when the user actually changes;
        signing out clears it.
        """
        user = coerce_identity_user(user)
        if user == self._user:
            return

        self._user = user
        self._notify(StateChange.USER)

        seller = is_seller(user)
        if seller != self._is_seller:
            self._is_seller = seller
            self._notify(StateChange.SELLER)

        logger.info(
            f"User {'signed out' if user is None else sanitize_id_for_logging(user.id)}, "
            f"seller={seller}"
        )

    def set_is_seller(self, value: bool) -> None:
        """Override the seller flag until the next user change."""
        value = bool(value)
        if value != self._is_seller:
            self._is_seller = value
            self._notify(StateChange.SELLER)

    # ==================== LIFECYCLE ====================

    async def mount(self) -> None:
        """Start using this state: fetch catalog and user data concurrently."""
        self._active = True
        await asyncio.gather(self.fetch_product_data(), self.fetch_user_data())

    def unmount(self) -> None:
        """Stop accepting fetch results; pending fetches will be discarded."""
        self._active = False
        self._products_generation += 1

    async def aclose(self) -> None:
        self.unmount()
        await self.catalog_client.aclose()

    # ==================== CONTEXT VALUE ====================

    def cart_summary(self) -> dict:
        """Cart view for JSON responses."""
        amount = self.get_cart_amount()
        return {
            "items": self._cart.to_dict(),
            "count": self.get_cart_count(),
            "amount": to_float(amount),
            "amount_display": format_money(amount, self.currency),
            "currency": self.currency,
        }

    def snapshot(self) -> dict:
        """The full context value the presentation layer renders from."""
        return {
            "currency": self.currency,
            "user": self._user.model_dump() if self._user else None,
            "is_seller": self._is_seller,
            "user_data": self._user_data.model_dump() if self._user_data else None,
            "products": [product.model_dump(mode="json") for product in self._products],
            "catalog_source": self._catalog_source,
            "cart": self.cart_summary(),
        }
