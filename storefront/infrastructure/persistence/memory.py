import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..repositories.product_repository import ProductRepository
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class InMemoryDataStore:
    """Process-wide owner of the in-memory repositories.

    Built once in the application lifespan and handed to the services that
    need it. Records live only as long as the instance; a new store starts
    from the sample data again.
    """

    def __init__(self, name: str = "storefront", seed: bool = True) -> None:
        self.name = name
        self.users = UserRepository(seed=seed)
        self.products = ProductRepository(seed=seed)
        self._connected_at: Optional[datetime] = None

    @property
    def is_connected(self) -> bool:
        return self._connected_at is not None

    def connect(self) -> None:
        if self.is_connected:
            return
        self._connected_at = datetime.now(timezone.utc)
        logger.info(
            "Data store %s ready (%d users, %d products)",
            self.name,
            self.users.count(),
            self.products.count(),
        )

    def close(self) -> None:
        if not self.is_connected:
            return
        self._connected_at = None
        logger.info("Data store %s closed", self.name)

    def status(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "connected": self.is_connected,
            "connected_at": self._connected_at.isoformat() if self._connected_at else None,
            "users": self.users.count(),
            "products": self.products.count(),
        }
