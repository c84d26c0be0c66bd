from __future__ import annotations

from datetime import datetime

from studylink.schemas.common import StringListMixin
from studylink.schemas.company import CompanySummaryOut


class JobCreate(StringListMixin):
    company_id: int | None = None
    name: str | None = None
    description: str | None = None
    featured_image: str | None = None
    skills: list[str] = []
    type: str | None = None
    availability: str | None = None


class JobUpdate(StringListMixin):
    name: str | None = None
    description: str | None = None
    featured_image: str | None = None
    skills: list[str] | None = None
    type: str | None = None
    availability: str | None = None


class JobOut(StringListMixin):
    id: int
    company_id: int
    name: str
    description: str
    featured_image: str | None = None
    skills: list[str] = []
    type: str | None = None
    availability: str | None = None
    company: CompanySummaryOut | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
