"""Input rules shared by the user and product services."""

from numbers import Real
from typing import Any, Optional

from ..domain.models import PaginationParams

MIN_NAME_LENGTH = 2
MIN_SEARCH_LENGTH = 2


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_name(name: Any) -> bool:
    return isinstance(name, str) and len(name.strip()) >= MIN_NAME_LENGTH


def is_valid_search_term(term: Optional[str]) -> bool:
    return bool(term) and len(term.strip()) >= MIN_SEARCH_LENGTH


def is_valid_price(price: Any) -> bool:
    return isinstance(price, Real) and not isinstance(price, bool) and price > 0


def is_valid_stock(stock: Any) -> bool:
    return _is_int(stock) and stock >= 0


def is_valid_quantity(quantity: Any) -> bool:
    return _is_int(quantity)


def pagination_error(params: PaginationParams) -> Optional[str]:
    if not (_is_int(params.page) and _is_int(params.limit)) or params.page < 1 or params.limit < 1:
        return "Page and limit must be positive integers"
    return None
