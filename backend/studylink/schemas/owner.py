from __future__ import annotations

from pydantic import BaseModel

from studylink.schemas.company import CompanySummaryOut
from studylink.schemas.school import SchoolOut
from studylink.schemas.user import CompanyOwnershipOut, SchoolOwnershipOut, UserSummaryOut


class CompanyOwnerCreate(BaseModel):
    user_id: int | None = None
    company_id: int | None = None


class CompanyOwnerUpdate(CompanyOwnerCreate):
    pass


class CompanyOwnerOut(CompanyOwnershipOut):
    user: UserSummaryOut
    company: CompanySummaryOut


class SchoolOwnerCreate(BaseModel):
    user_id: int | None = None
    school_id: int | None = None


class SchoolOwnerUpdate(SchoolOwnerCreate):
    pass


class SchoolOwnerOut(SchoolOwnershipOut):
    user: UserSummaryOut
    school: SchoolOut
