from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ExperienceCreate(BaseModel):
    position: str | None = None
    company: str | None = None
    type: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


class ExperienceUpdate(ExperienceCreate):
    pass


class ExperienceOut(BaseModel):
    id: int
    student_id: int
    position: str
    company: str
    type: str
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
