"""Configuration from environment variables (optionally via a .env file)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BACKENDS = ("json", "sql")

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings:
    """Storefront settings.

    STOREFRONT_BACKEND       json (default) or sql
    STOREFRONT_DATA_DIR      JSON files and the cart session live here
    STOREFRONT_DATABASE_URL  SQLAlchemy URL for the sql backend
    STOREFRONT_LOG_LEVEL     logging level name, default WARNING
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        env = os.environ if environ is None else environ

        self.backend = env.get("STOREFRONT_BACKEND", "json").strip().lower()
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Unknown STOREFRONT_BACKEND '{self.backend}'. "
                f"Expected one of: {', '.join(BACKENDS)}"
            )

        self.data_dir = Path(env.get("STOREFRONT_DATA_DIR") or DEFAULT_DATA_DIR)
        self.database_url = (
            env.get("STOREFRONT_DATABASE_URL")
            or f"sqlite:///{self.data_dir / 'storefront.db'}"
        )
        self.log_level = env.get("STOREFRONT_LOG_LEVEL", "WARNING").upper()

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def cart_file(self) -> Path:
        return self.data_dir / "cart.json"


def load_settings() -> Settings:
    """Read .env (if present) into the environment and build Settings."""
    load_dotenv()
    settings = Settings()
    logger.debug("Using %s backend, data dir %s", settings.backend, settings.data_dir)
    return settings
