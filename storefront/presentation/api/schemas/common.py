"""Shared pydantic schemas for the JSON envelope and pagination."""

from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ApiEnvelope(CamelModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None


class PaginationSchema(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class PaginatedSchema(CamelModel, Generic[T]):
    data: List[T]
    pagination: PaginationSchema
