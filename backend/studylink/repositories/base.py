from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy.orm import Query, Session


T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        if self.limit <= 0:
            return 0
        return math.ceil(self.total / self.limit)


def paginate(query: Query, page: int, limit: int) -> Page:
    # count and fetch share the session's transaction
    total = query.order_by(None).count()
    items = query.offset((page - 1) * limit).limit(limit).all()
    return Page(items=items, total=total, page=page, limit=limit)


class Repository(Generic[T]):
    model: type

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, entity_id: int) -> T | None:
        return self.db.get(self.model, entity_id)

    def exists(self, entity_id: int | None) -> bool:
        if entity_id is None:
            return False
        return self.get(entity_id) is not None

    def add(self, entity: T, commit: bool = True) -> T:
        self.db.add(entity)
        if commit:
            self.db.commit()
            self.db.refresh(entity)
        else:
            self.db.flush()
        return entity

    def delete(self, entity: T) -> None:
        self.db.delete(entity)
        self.db.commit()
