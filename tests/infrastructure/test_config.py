"""Unit tests for environment-driven settings."""

from pathlib import Path

import pytest

from storefront.infrastructure.config import DEFAULT_DATA_DIR, Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings({})
        assert settings.backend == "json"
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.database_url == f"sqlite:///{DEFAULT_DATA_DIR / 'storefront.db'}"
        assert settings.log_level == "WARNING"

    def test_overrides(self, tmp_path):
        settings = Settings({
            "STOREFRONT_BACKEND": "SQL",
            "STOREFRONT_DATA_DIR": str(tmp_path),
            "STOREFRONT_LOG_LEVEL": "debug",
        })
        assert settings.backend == "sql"
        assert settings.orders_file == Path(tmp_path) / "orders.json"
        assert settings.cart_file == Path(tmp_path) / "cart.json"
        assert settings.database_url.endswith("storefront.db")
        assert settings.log_level == "DEBUG"

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValueError, match="Unknown STOREFRONT_BACKEND"):
            Settings({"STOREFRONT_BACKEND": "mongo"})
