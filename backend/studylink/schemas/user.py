from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class UserCreate(BaseModel):
    email: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    profile_picture: str | None = None


class UserUpdate(BaseModel):
    email: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    profile_picture: str | None = None


class UserOut(BaseModel):
    id: int
    email: str
    firstname: str | None = None
    lastname: str | None = None
    type: str | None = None
    profile_picture: str | None = None
    profile_completed: bool = False
    email_verified_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class UserSummaryOut(BaseModel):
    id: int
    email: str
    firstname: str | None = None
    lastname: str | None = None
    profile_picture: str | None = None

    class Config:
        from_attributes = True


class OwnershipOut(BaseModel):
    id: int
    user_id: int

    class Config:
        from_attributes = True


class CompanyOwnershipOut(OwnershipOut):
    company_id: int


class SchoolOwnershipOut(OwnershipOut):
    school_id: int


class StudentLinkOut(BaseModel):
    id: int
    school_id: int
    status: str

    class Config:
        from_attributes = True


class CurrentUserOut(UserOut):
    student: StudentLinkOut | None = None
    company_owner: CompanyOwnershipOut | None = None
    school_owner: SchoolOwnershipOut | None = None
