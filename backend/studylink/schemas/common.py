from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, field_validator

from studylink.models.types import split_items


T = TypeVar("T")


class FieldErrorOut(BaseModel):
    field: str
    message: str


class ErrorOut(BaseModel):
    error: str
    details: list[FieldErrorOut] | None = None
    code: str | None = None


class PageOut(BaseModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int
    total_pages: int


class SuccessOut(BaseModel):
    success: bool = True


class MessageOut(BaseModel):
    message: str


def coerce_string_list(value):
    if isinstance(value, str):
        return split_items(value)
    return value


class StringListMixin(BaseModel):
    """Accepts either a JSON list or a comma-joined string for list fields."""

    @field_validator("skills", "previous_companies", mode="before", check_fields=False)
    @classmethod
    def _split_strings(cls, value):
        return coerce_string_list(value)
