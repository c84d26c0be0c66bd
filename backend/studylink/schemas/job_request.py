from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from studylink.schemas.company import CompanySummaryOut
from studylink.schemas.user import UserSummaryOut


class JobRequestCreate(BaseModel):
    student_id: int | None = None
    job_id: int | None = None
    status: str | None = None


class JobApplicationCreate(BaseModel):
    job_id: int | None = None
    subject: str | None = None
    message: str | None = None


class JobRequestStatusUpdate(BaseModel):
    status: str | None = None


class JobRequestOut(BaseModel):
    id: int
    student_id: int
    job_id: int
    status: str
    subject: str | None = None
    message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class JobRequestJobOut(BaseModel):
    id: int
    name: str
    company_id: int
    company: CompanySummaryOut | None = None

    class Config:
        from_attributes = True


class JobRequestStudentOut(BaseModel):
    id: int
    user_id: int
    user: UserSummaryOut | None = None

    class Config:
        from_attributes = True


class JobRequestDetailOut(JobRequestOut):
    job: JobRequestJobOut | None = None
    student: JobRequestStudentOut | None = None
