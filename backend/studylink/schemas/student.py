from __future__ import annotations

from datetime import datetime

from studylink.schemas.common import StringListMixin
from studylink.schemas.school import SchoolSummaryOut
from studylink.schemas.user import UserSummaryOut


class StudentCreate(StringListMixin):
    user_id: int | None = None
    school_id: int | None = None
    student_email: str | None = None
    status: str | None = None
    skills: list[str] | None = None
    apprenticeship_rhythm: str | None = None
    description: str | None = None
    curriculum_vitae: str | None = None
    previous_companies: list[str] | None = None
    availability: bool | None = None


class StudentUpdate(StringListMixin):
    student_email: str | None = None
    status: str | None = None
    skills: list[str] | None = None
    apprenticeship_rhythm: str | None = None
    description: str | None = None
    curriculum_vitae: str | None = None
    previous_companies: list[str] | None = None
    availability: bool | None = None


class StudentProfileCreate(StringListMixin):
    firstname: str | None = None
    lastname: str | None = None
    student_email: str | None = None
    school_id: int | None = None
    status: str | None = None
    skills: list[str] | None = None
    description: str | None = None
    previous_companies: list[str] = []
    availability: bool = True
    apprenticeship_rhythm: str | None = None
    curriculum_vitae: str | None = None


class StudentProfileUpdate(StudentUpdate):
    firstname: str | None = None
    lastname: str | None = None


class StudentOut(StringListMixin):
    id: int
    user_id: int
    school_id: int
    student_email: str | None = None
    status: str
    skills: list[str] = []
    apprenticeship_rhythm: str | None = None
    description: str
    curriculum_vitae: str | None = None
    previous_companies: list[str] = []
    availability: bool
    user: UserSummaryOut | None = None
    school: SchoolSummaryOut | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
