from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class SchoolOwnerIn(BaseModel):
    email: str | None = None
    firstname: str | None = None
    lastname: str | None = None


class SchoolCreate(BaseModel):
    name: str | None = None
    domain_id: int | None = None
    logo: str | None = None
    owner: SchoolOwnerIn | None = None


class SchoolUpdate(BaseModel):
    name: str | None = None
    domain_id: int | None = None
    logo: str | None = None
    is_active: bool | None = None


class SchoolDomainOut(BaseModel):
    id: int
    domain: str

    class Config:
        from_attributes = True


class SchoolOut(BaseModel):
    id: int
    name: str
    domain_id: int
    logo: str | None = None
    is_active: bool
    domain: SchoolDomainOut | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


class SchoolSummaryOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class SchoolDomainCreate(BaseModel):
    domain: str


class SchoolDomainUpdate(BaseModel):
    domain: str | None = None


class SchoolDomainDetailOut(SchoolDomainOut):
    school_count: int = 0


class ValidateSchoolEmailRequest(BaseModel):
    email: str


class ValidateSchoolEmailResponse(BaseModel):
    is_valid: bool
    domain: str | None = None
    schools: list[SchoolSummaryOut] = []
