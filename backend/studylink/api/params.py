from __future__ import annotations

from dataclasses import dataclass

from fastapi import Query
from pydantic import BaseModel

from studylink.config import settings
from studylink.models.types import split_items
from studylink.repositories.base import Page


@dataclass
class PageParams:
    page: int
    limit: int


def page_params(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.default_page_size, ge=1),
) -> PageParams:
    return PageParams(page=page, limit=min(limit, settings.max_page_size))


def page_out(page: Page, schema: type[BaseModel]) -> dict:
    return {
        "items": [schema.model_validate(item) for item in page.items],
        "total": page.total,
        "page": page.page,
        "limit": page.limit,
        "total_pages": page.total_pages,
    }


def skills_param(skills: str | None = Query(None, description="Comma separated skills, all must match")) -> list[str]:
    return split_items(skills) if skills else []
