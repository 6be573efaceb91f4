"""Generic in-memory repository with filter, sort and pagination support."""

from __future__ import annotations

import dataclasses
import logging
import math
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from functools import cmp_to_key
from typing import (
    Any,
    Callable,
    ContextManager,
    Generic,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Set,
    Type,
    TypeVar,
)

from ...domain.exceptions import DomainError, RepositoryError
from ...domain.models import BASE_FIELDS, BaseEntity, PaginatedResult, Pagination, PaginationParams, QueryOptions

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEntity)

_MISSING = object()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _compare(left: Any, right: Any) -> int:
    if left is _MISSING or right is _MISSING:
        return 0
    try:
        if left < right:
            return -1
        if left > right:
            return 1
    except TypeError:
        return 0
    return 0


class InMemoryRepository(Generic[T]):
    """Ordered collection of entities keyed by ``id``.

    The instance exclusively owns its backing list. Stored records are never
    mutated in place; ``update`` swaps in a new dataclass instance.
    """

    def __init__(
        self,
        name: str,
        entity_type: Type[T],
        seed: Iterable[T] = (),
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ) -> None:
        self.name = name
        self._entity_type = entity_type
        self._id_factory = id_factory
        self._items: List[T] = list(seed)
        self._issued_ids: Set[str] = {item.id for item in self._items}
        self._lock = threading.RLock()

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        with self._lock:
            try:
                yield
            except (DomainError, RepositoryError):
                raise
            except Exception as exc:
                logger.exception("Error trying to %s %s", action, self.name)
                raise RepositoryError(f"Failed to {action} {self.name}") from exc

    # Writes ---------------------------------------------------------------
    def create(self, fields: Mapping[str, Any]) -> T:
        with self._guard("create"):
            values = {key: value for key, value in fields.items() if key not in BASE_FIELDS}
            now = utcnow()
            entity = self._entity_type(id=self._next_id(), created_at=now, updated_at=now, **values)
            self._items.append(entity)
            logger.info("Created %s with ID: %s", self.name, entity.id)
            return entity

    def update(self, entity_id: str, fields: Mapping[str, Any]) -> Optional[T]:
        with self._guard("update"):
            index = self._index_of(entity_id)
            if index is None:
                return None
            values = {key: value for key, value in fields.items() if key not in BASE_FIELDS}
            updated = dataclasses.replace(self._items[index], updated_at=utcnow(), **values)
            self._items[index] = updated
            logger.info("Updated %s with ID: %s", self.name, entity_id)
            return updated

    def delete(self, entity_id: str) -> bool:
        with self._guard("delete"):
            index = self._index_of(entity_id)
            if index is None:
                return False
            del self._items[index]
            logger.info("Deleted %s with ID: %s", self.name, entity_id)
            return True

    # Reads ----------------------------------------------------------------
    def find_by_id(self, entity_id: str) -> Optional[T]:
        with self._guard("find"):
            for item in self._items:
                if item.id == entity_id:
                    return item
            return None

    def find_all(self, options: Optional[QueryOptions] = None) -> List[T]:
        with self._guard("find all"):
            result = list(self._items)
            if options is None:
                return result

            if options.where:
                conditions = list(options.where.items())
                result = [
                    item
                    for item in result
                    if all(getattr(item, key, _MISSING) == value for key, value in conditions)
                ]

            if options.order_by:
                field_name, direction = next(iter(options.order_by.items()))
                if len(options.order_by) > 1:
                    logger.debug("Only the first sort key (%s) is applied to %s", field_name, self.name)
                sign = -1 if direction == "desc" else 1
                result.sort(
                    key=cmp_to_key(
                        lambda a, b: sign
                        * _compare(getattr(a, field_name, _MISSING), getattr(b, field_name, _MISSING))
                    )
                )

            if options.offset:
                result = result[options.offset :]
            if options.limit:
                result = result[: options.limit]

            logger.debug("Found %d %s records", len(result), self.name)
            return result

    def find_where(self, predicate: Callable[[T], bool]) -> List[T]:
        """Linear scan for conditions that are not flat equality checks."""
        with self._guard("find"):
            return [item for item in self._items if predicate(item)]

    def find_first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        with self._guard("find"):
            return next((item for item in self._items if predicate(item)), None)

    def find_with_pagination(
        self, params: PaginationParams, options: Optional[QueryOptions] = None
    ) -> PaginatedResult[T]:
        with self._guard("paginate"):
            base = dataclasses.replace(options) if options else QueryOptions()
            if params.sort_by and not base.order_by:
                base.order_by = {params.sort_by: params.sort_order or "asc"}
            total = len(self.find_all(base))

            window = dataclasses.replace(base, offset=(params.page - 1) * params.limit, limit=params.limit)
            data = self.find_all(window)
            return PaginatedResult(
                data=data,
                pagination=Pagination(
                    page=params.page,
                    limit=params.limit,
                    total=total,
                    pages=math.ceil(total / params.limit),
                ),
            )

    def count(self, options: Optional[QueryOptions] = None) -> int:
        with self._guard("count"):
            return len(self.find_all(options))

    def exists(self, entity_id: str) -> bool:
        try:
            return self.find_by_id(entity_id) is not None
        except RepositoryError:
            logger.warning("Existence check failed for %s %s", self.name, entity_id)
            return False

    def transaction(self) -> ContextManager[Any]:
        """Lock held across a read-check-write sequence."""
        return self._lock

    # Internals ------------------------------------------------------------
    def _index_of(self, entity_id: str) -> Optional[int]:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                return index
        return None

    def _next_id(self) -> str:
        candidate = self._id_factory()
        while candidate in self._issued_ids:
            candidate = self._id_factory()
        self._issued_ids.add(candidate)
        return candidate
