"""Query, pagination and result containers used by repositories."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Literal, Optional, TypeVar

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]


@dataclass(slots=True)
class QueryOptions:
    """Filter, ordering and window applied by ``find_all``.

    ``where`` conditions are ANDed equality checks on top-level attributes.
    Only the first entry of ``order_by`` is honoured.
    """

    where: Dict[str, Any] = field(default_factory=dict)
    order_by: Dict[str, SortOrder] = field(default_factory=dict)
    limit: Optional[int] = None
    offset: Optional[int] = None


@dataclass(slots=True)
class PaginationParams:
    page: int
    limit: int
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None


@dataclass(slots=True)
class Pagination:
    page: int
    limit: int
    total: int
    pages: int


@dataclass(slots=True)
class PaginatedResult(Generic[T]):
    data: List[T]
    pagination: Pagination
