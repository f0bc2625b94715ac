"""
Durable key-value storage for the cart snapshot.

Mirrors the browser Web Storage contract: string slots addressed by string
keys. Reads and writes are best-effort; callers get an empty cart instead of
an error when the snapshot is missing or unreadable.
"""
import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from quickcart.errors import ERROR_CORRUPT_SNAPSHOT
from quickcart.logging import get_logger

from .models import CartMapping

logger = get_logger(__name__)

CART_STORAGE_KEY = "quickcart_cart"


class LocalStorage(Protocol):
    """String slot store."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local storage; contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._slots: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._slots.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._slots[key] = value

    def remove_item(self, key: str) -> None:
        self._slots.pop(key, None)


class FileStorage:
    """
    All slots in one JSON file.

    Writes go through a temp file + rename so a crash mid-write leaves the
    previous file intact.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold an object")
        return data

    def _write_all(self, slots: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(slots, f)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            slots = self._read_all()
        except ValueError:
            # Unreadable file: start over rather than refuse every write
            slots = {}
        slots[key] = value
        self._write_all(slots)

    def remove_item(self, key: str) -> None:
        slots = self._read_all()
        if slots.pop(key, None) is not None:
            self._write_all(slots)


def load_cart(storage: LocalStorage, key: str = CART_STORAGE_KEY) -> CartMapping:
    """Rehydrate the cart; a missing or corrupt snapshot yields an empty cart."""
    try:
        raw = storage.get_item(key)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to read cart snapshot: {e}")
        return CartMapping()

    if raw is None:
        return CartMapping()

    try:
        return CartMapping.from_json(raw)
    except ValueError as e:
        logger.warning(f"{ERROR_CORRUPT_SNAPSHOT}, starting with an empty cart: {e}")
        return CartMapping()


def save_cart(storage: LocalStorage, cart: CartMapping, key: str = CART_STORAGE_KEY) -> bool:
    """Write the cart snapshot. Returns False (and logs) if the write failed."""
    try:
        storage.set_item(key, cart.to_json())
        return True
    except OSError as e:
        logger.warning(f"Failed to save cart snapshot: {e}")
        return False
