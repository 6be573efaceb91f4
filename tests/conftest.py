"""
Test configuration and fixtures
"""

import pytest
from fastapi.testclient import TestClient

from storefront.core.app_factory import create_application
from storefront.core.config import Settings
from storefront.infrastructure.repositories.product_repository import ProductRepository
from storefront.infrastructure.repositories.user_repository import UserRepository
from storefront.services.dashboard_service import DashboardService
from storefront.services.product_service import ProductService
from storefront.services.user_service import UserService

_ENV_KEYS = (
    "APP_TITLE",
    "STORE_NAME",
    "SEED_SAMPLE_DATA",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SORT_BY",
    "DEFAULT_SORT_ORDER",
    "LOW_STOCK_THRESHOLD",
    "CORS_ALLOW_ORIGINS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables and .env files out of Settings."""
    monkeypatch.setattr("storefront.core.config.load_dotenv", lambda: False)
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def user_repository():
    return UserRepository()


@pytest.fixture
def product_repository():
    return ProductRepository()


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.fixture
def product_service(product_repository):
    return ProductService(product_repository)


@pytest.fixture
def dashboard_service(user_repository, product_repository):
    return DashboardService(user_repository, product_repository, low_stock_threshold=30)


@pytest.fixture
def client():
    """Test client running the full lifespan against freshly seeded data."""
    app = create_application(Settings())
    with TestClient(app) as test_client:
        yield test_client
