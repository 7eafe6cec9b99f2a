"""Envelopes shared by every resource: paginated lists and validation errors."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from ._base import OutsetaModel

T = TypeVar("T")


class Metadata(BaseModel):
    """Pagination metadata for list responses."""

    limit: int
    offset: int
    total: int


class ListResponse(BaseModel, Generic[T]):
    """A page of results: ``{"metadata": {...}, "items": [...]}``."""

    metadata: Metadata
    items: list[T] = Field(default_factory=list)


class ErrorDetail(OutsetaModel):
    error_code: str | None = None
    error_message: str | None = None
    property_name: str | None = None


class EntityValidationError(OutsetaModel):
    entity: Any | None = None
    type_name: str | None = None
    validation_errors: list[ErrorDetail] = Field(default_factory=list)


class ValidationError(OutsetaModel):
    """Body of a 400 response.

    Returned (not raised) by methods that accept input, so check with
    ``isinstance(result, ValidationError)`` before using the result.
    """

    error_message: str | None = None
    entity_validation_errors: list[EntityValidationError] = Field(default_factory=list)


__all__ = [
    "Metadata",
    "ListResponse",
    "ErrorDetail",
    "EntityValidationError",
    "ValidationError",
]
