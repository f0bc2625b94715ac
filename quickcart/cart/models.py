"""Cart mapping: product id -> quantity, with every quantity >= 1."""
import json
from collections.abc import Mapping
from typing import Dict, Iterator, Optional, Union

from quickcart.errors import ERROR_CORRUPT_SNAPSHOT, ERROR_INVALID_QUANTITY
from quickcart.models import ProductId, product_id


def validate_quantity(quantity) -> int:
    """Reject anything that is not a non-negative int (bools included)."""
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
        raise ValueError(ERROR_INVALID_QUANTITY)
    return quantity


class CartMapping(Mapping):
    """
    Immutable cart contents.

    Mutations return a new mapping so the previous value stays valid for
    anyone still holding it. An entry is never stored with quantity 0;
    setting 0 removes it.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Mapping] = None):
        normalized: Dict[ProductId, int] = {}
        for key, quantity in (items or {}).items():
            quantity = validate_quantity(quantity)
            if quantity == 0:
                continue
            normalized[product_id(key)] = quantity
        self._items = normalized

    def __getitem__(self, key: Union[str, int]) -> int:
        try:
            return self._items[product_id(key)]
        except ValueError:
            raise KeyError(key)

    def __iter__(self) -> Iterator[ProductId]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key) -> bool:
        try:
            return product_id(key) in self._items
        except ValueError:
            return False

    def __eq__(self, other) -> bool:
        if isinstance(other, Mapping):
            return dict(self._items) == dict(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"CartMapping({self._items!r})"

    def incremented(self, item_id: ProductId) -> "CartMapping":
        """New mapping with one more unit of item_id."""
        items = dict(self._items)
        items[item_id] = items.get(item_id, 0) + 1
        return CartMapping(items)

    def with_quantity(self, item_id: ProductId, quantity: int) -> "CartMapping":
        """New mapping with item_id set to quantity; 0 removes the entry."""
        quantity = validate_quantity(quantity)
        items = dict(self._items)
        if quantity == 0:
            items.pop(item_id, None)
        else:
            items[item_id] = quantity
        return CartMapping(items)

    @property
    def total_quantity(self) -> int:
        """Sum of all quantities."""
        return sum(quantity for quantity in self._items.values() if quantity > 0)

    def to_dict(self) -> Dict[str, int]:
        """Plain dict for JSON responses and storage."""
        return dict(self._items)

    def to_json(self) -> str:
        """Serialize to the storage snapshot format: {"2": 3, "5": 1}."""
        return json.dumps(self._items, separators=(",", ":"))

    @classmethod
    def from_json(cls, raw: str) -> "CartMapping":
        """
        Parse a storage snapshot.

        Raises:
            ValueError: if the snapshot is not a JSON object of positive
                integer quantities keyed by valid product ids
        """
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as e:
            raise ValueError(f"{ERROR_CORRUPT_SNAPSHOT}: {e}")

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"{ERROR_CORRUPT_SNAPSHOT}: expected an object")

        for quantity in data.values():
            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
                raise ValueError(f"{ERROR_CORRUPT_SNAPSHOT}: bad quantity {quantity!r}")
        return cls(data)
