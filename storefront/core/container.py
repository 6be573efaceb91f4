from dataclasses import dataclass

from ..infrastructure.persistence.memory import InMemoryDataStore
from ..services.dashboard_service import DashboardService
from ..services.product_service import ProductService
from ..services.user_service import UserService
from .config import Settings


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    store: InMemoryDataStore
    user_service: UserService
    product_service: ProductService
    dashboard_service: DashboardService


def build_container(settings: Settings) -> ApplicationContainer:
    store = InMemoryDataStore(name=settings.store_name, seed=settings.seed_sample_data)
    return ApplicationContainer(
        settings=settings,
        store=store,
        user_service=UserService(store.users),
        product_service=ProductService(store.products),
        dashboard_service=DashboardService(
            store.users,
            store.products,
            low_stock_threshold=settings.low_stock_threshold,
        ),
    )
