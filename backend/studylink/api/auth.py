from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studylink.auth import Principal, create_access_token, create_signin_token, decode_signin_token, get_current_principal
from studylink.database import get_db, utcnow
from studylink.errors import AuthenticationRequired, FieldError, ValidationFailed
from studylink.models.company import Company, CompanyOwner
from studylink.models.student import Student
from studylink.models.user import User
from studylink.repositories.schools import SchoolRepository
from studylink.repositories.users import UserRepository
from studylink.schemas.auth import (
    AuthenticateRequest,
    AuthenticateResponse,
    AuthResponse,
    CompanySignupRequest,
    SignupRequest,
    VerifyRequest,
)
from studylink.schemas.user import CurrentUserOut, UserOut
from studylink.services.mailer import Mailer, get_mailer
from studylink.services.notifications import send_signin_link
from studylink.validation.companies import validate_company_data
from studylink.validation.users import validate_user_data


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=UserOut, status_code=201)
def signup(payload: SignupRequest, db: Session = Depends(get_db)) -> User:
    if payload.type != "student":
        raise ValidationFailed([FieldError("type", "Only student sign-up is allowed")], message="Invalid user type")

    result = validate_user_data(
        db, {"email": payload.email, "firstname": payload.firstname, "lastname": payload.lastname}
    )
    if payload.school_id is None:
        result.add("school_id", "School id is required")
    elif SchoolRepository(db).get_active(payload.school_id) is None:
        result.add("school_id", "The specified school does not exist")
    result.raise_if_invalid()

    user = User(
        email=payload.email.strip().lower(),
        firstname=payload.firstname.strip(),
        lastname=payload.lastname.strip(),
        type="student",
    )
    db.add(user)
    db.flush()
    # placeholder profile, completed later through /api/students/profile
    db.add(
        Student(
            user_id=user.id,
            school_id=payload.school_id,
            status="PENDING",
            skills=[],
            description="",
            previous_companies=[],
            availability=False,
        )
    )
    db.commit()
    db.refresh(user)
    logger.info("User %s signed up as student of school %s", user.id, payload.school_id)
    return user


@router.post("/company-signup", response_model=UserOut, status_code=201)
def company_signup(payload: CompanySignupRequest, db: Session = Depends(get_db)) -> User:
    if payload.type != "company_owner":
        raise ValidationFailed(
            [FieldError("type", "Only company owner sign-up is allowed")], message="Invalid user type"
        )

    result = validate_user_data(
        db, {"email": payload.email, "firstname": payload.firstname, "lastname": payload.lastname}
    )
    for error in validate_company_data({"name": payload.company_name}).errors:
        result.add("company_name", error.message)
    result.raise_if_invalid()

    company = Company(name=payload.company_name.strip())
    user = User(
        email=payload.email.strip().lower(),
        firstname=payload.firstname.strip(),
        lastname=payload.lastname.strip(),
        type="company_owner",
    )
    db.add_all([company, user])
    db.flush()
    db.add(CompanyOwner(user_id=user.id, company_id=company.id))
    db.commit()
    db.refresh(user)
    logger.info("User %s signed up as owner of company %s", user.id, company.id)
    return user


@router.post("/authenticate", response_model=AuthenticateResponse)
def authenticate(
    payload: AuthenticateRequest,
    db: Session = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
) -> AuthenticateResponse:
    user = UserRepository(db).get_by_email(payload.email)
    if user is None or user.deleted_at is not None:
        logger.info("Sign-in requested for unknown email")
        return AuthenticateResponse()

    try:
        send_signin_link(mailer, user, create_signin_token(user.id))
    except httpx.HTTPError:
        logger.exception("Failed to send sign-in link to user %s", user.id)
    return AuthenticateResponse()


@router.post("/verify", response_model=AuthResponse)
def verify(payload: VerifyRequest, db: Session = Depends(get_db)) -> AuthResponse:
    user_id = decode_signin_token(payload.token)
    user = UserRepository(db).get_active(user_id) if user_id is not None else None
    if user is None:
        raise AuthenticationRequired("Invalid or expired sign-in link")

    if user.email_verified_at is None:
        user.email_verified_at = utcnow()
        db.commit()
    return AuthResponse(access_token=create_access_token(user.id), email=user.email)


@router.get("/me", response_model=CurrentUserOut)
def me(db: Session = Depends(get_db), principal: Principal = Depends(get_current_principal)) -> User:
    user = UserRepository(db).get_active(principal.user_id)
    if user is None:
        raise AuthenticationRequired()
    return user
