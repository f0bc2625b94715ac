"""Tests for settings loading"""
from quickcart.config import DEFAULT_CURRENCY, DEFAULT_PRODUCTS_URL, Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("QUICKCART_CURRENCY", "QUICKCART_PRODUCTS_URL", "QUICKCART_STORAGE_PATH", "QUICKCART_FETCH_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.currency == DEFAULT_CURRENCY
    assert settings.products_url == DEFAULT_PRODUCTS_URL
    assert settings.storage_path is None
    assert settings.fetch_timeout == 5.0


def test_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("QUICKCART_CURRENCY", "€")
    monkeypatch.setenv("QUICKCART_PRODUCTS_URL", "https://shop.example.com/api/products")
    monkeypatch.setenv("QUICKCART_STORAGE_PATH", str(tmp_path / "storage.json"))
    monkeypatch.setenv("QUICKCART_FETCH_TIMEOUT", "2.5")

    settings = Settings.from_env()

    assert settings.currency == "€"
    assert settings.products_url == "https://shop.example.com/api/products"
    assert settings.storage_path == str(tmp_path / "storage.json")
    assert settings.fetch_timeout == 2.5


def test_bad_timeout_uses_default(monkeypatch):
    monkeypatch.setenv("QUICKCART_FETCH_TIMEOUT", "soon")
    assert Settings.from_env().fetch_timeout == 5.0


def test_get_settings_is_cached(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("QUICKCART_CURRENCY", "USD")
    try:
        first = get_settings()
        monkeypatch.setenv("QUICKCART_CURRENCY", "EUR")
        assert get_settings() is first
        assert first.currency == "USD"
    finally:
        get_settings.cache_clear()
