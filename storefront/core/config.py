import os
from typing import Optional

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}
_SORT_ORDERS = {"asc", "desc"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings:
    """Centralised application configuration sourced from environment variables."""

    def __init__(self) -> None:
        load_dotenv()
        self.app_title = os.getenv("APP_TITLE", "Storefront Admin API")
        self.store_name = os.getenv("STORE_NAME", "storefront")
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if self.log_level not in _LOG_LEVELS:
            raise RuntimeError(f"Environment variable LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}")
        self.seed_sample_data = self._get_bool("SEED_SAMPLE_DATA", default=True)
        self.default_page_size = self._get_int("DEFAULT_PAGE_SIZE", default=10)
        self.default_sort_by = os.getenv("DEFAULT_SORT_BY", "createdAt")
        self.default_sort_order = os.getenv("DEFAULT_SORT_ORDER", "desc").lower()
        if self.default_sort_order not in _SORT_ORDERS:
            raise RuntimeError("Environment variable DEFAULT_SORT_ORDER must be 'asc' or 'desc'")
        self.low_stock_threshold = self._get_int("LOW_STOCK_THRESHOLD", default=10)
        origins = os.getenv("CORS_ALLOW_ORIGINS")
        if origins:
            self.cors_allow_origins = [item.strip() for item in origins.split(",") if item.strip()]
        else:
            self.cors_allow_origins = ["*"]

    @staticmethod
    def _get_int(key: str, default: Optional[int] = None) -> int:
        value = os.getenv(key)
        if value is None:
            if default is None:
                raise RuntimeError(f"Missing required environment variable: {key}")
            return default
        try:
            return int(value)
        except ValueError as exc:
            raise RuntimeError(f"Environment variable {key} must be an integer") from exc

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise RuntimeError(f"Environment variable {key} must be a boolean")
