from __future__ import annotations

from sqlalchemy import literal, type_coerce
from sqlalchemy.types import Text, TypeDecorator


class CommaSeparatedList(TypeDecorator):
    """Ordered list of strings persisted as a single comma-joined column."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, str):
            value = split_items(value)
        return ",".join(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return []
        return split_items(value)

    def coerce_compared_value(self, op, value):
        # LIKE patterns are compared against the raw joined string
        return Text()


def split_items(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def list_contains(column, item: str):
    """Whole-item, case-insensitive match against a CommaSeparatedList column."""
    padded = literal(",") + type_coerce(column, Text) + literal(",")
    return padded.ilike(f"%,{item.strip()},%")
