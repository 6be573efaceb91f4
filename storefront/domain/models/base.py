from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

BASE_FIELDS = frozenset({"id", "created_at", "updated_at"})


@dataclass(slots=True, frozen=True)
class BaseEntity:
    """Identity and audit timestamps shared by every stored record."""

    id: str
    created_at: datetime
    updated_at: datetime
