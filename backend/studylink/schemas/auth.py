from __future__ import annotations

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    firstname: str = Field(min_length=1, max_length=120)
    lastname: str = Field(min_length=1, max_length=120)
    type: str = "student"
    school_id: int | None = None


class AuthenticateRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)


class AuthenticateResponse(BaseModel):
    sent: bool = True


class VerifyRequest(BaseModel):
    token: str = Field(min_length=1)


class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    email: str


class CompanySignupRequest(BaseModel):
    email: str = Field(min_length=3, max_length=320)
    firstname: str = Field(min_length=1, max_length=120)
    lastname: str = Field(min_length=1, max_length=120)
    type: str = "company_owner"
    company_name: str = Field(min_length=1, max_length=100)
