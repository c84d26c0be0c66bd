from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class CompanyCreate(BaseModel):
    user_id: int | None = None
    name: str | None = None
    logo: str | None = None


class CompanyUpdate(BaseModel):
    name: str | None = None
    logo: str | None = None


class CompanyOut(BaseModel):
    id: int
    name: str
    logo: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class CompanySummaryOut(BaseModel):
    id: int
    name: str
    logo: str | None = None

    class Config:
        from_attributes = True
