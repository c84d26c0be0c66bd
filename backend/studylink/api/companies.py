from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studylink.database import get_db
from studylink.errors import FieldError, NotFound, ValidationFailed
from studylink.models.company import Company, CompanyOwner
from studylink.models.job import Job
from studylink.models.job_request import JobRequest
from studylink.repositories.companies import CompanyRepository
from studylink.repositories.job_requests import JobRequestRepository
from studylink.repositories.jobs import JobRepository
from studylink.repositories.users import UserRepository
from studylink.schemas.common import MessageOut
from studylink.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate
from studylink.schemas.job import JobOut
from studylink.schemas.job_request import JobRequestDetailOut
from studylink.validation.companies import validate_company_data, validate_company_owner_data


logger = logging.getLogger(__name__)

router = APIRouter()


def _get_company_or_404(db: Session, company_id: int) -> Company:
    company = CompanyRepository(db).get(company_id)
    if company is None:
        raise NotFound("Company not found")
    return company


@router.get("", response_model=list[CompanyOut])
def list_companies(db: Session = Depends(get_db)) -> list[Company]:
    return CompanyRepository(db).list_all()


@router.post("", response_model=CompanyOut, status_code=201)
def create_company(payload: CompanyCreate, db: Session = Depends(get_db)) -> Company:
    data = payload.model_dump()
    user_id = data.pop("user_id")
    if user_id is None:
        raise ValidationFailed([FieldError("user_id", "User id is required")], message="User id is required")

    user = UserRepository(db).get_active(user_id)
    if user is None:
        raise NotFound("User not found")
    result = validate_company_owner_data(db, {"user_id": user.id}, is_update=True)
    result.errors.extend(validate_company_data(data).errors)
    result.raise_if_invalid()

    company = Company(name=data["name"].strip(), logo=data.get("logo") or None)
    db.add(company)
    db.flush()
    db.add(CompanyOwner(user_id=user.id, company_id=company.id))
    user.type = "company_owner"
    db.commit()
    db.refresh(company)
    logger.info("Company %s created and owned by user %s", company.id, user.id)
    return company


@router.get("/{company_id}", response_model=CompanyOut)
def get_company(company_id: int, db: Session = Depends(get_db)) -> Company:
    return _get_company_or_404(db, company_id)


@router.put("/{company_id}", response_model=CompanyOut)
def update_company(company_id: int, payload: CompanyUpdate, db: Session = Depends(get_db)) -> Company:
    company = _get_company_or_404(db, company_id)
    data = payload.model_dump(exclude_unset=True)
    validate_company_data(data, is_update=True).raise_if_invalid()

    if data.get("name"):
        company.name = data["name"].strip()
    if "logo" in data:
        company.logo = data["logo"] or None
    return CompanyRepository(db).add(company)


@router.delete("/{company_id}", response_model=MessageOut)
def delete_company(company_id: int, db: Session = Depends(get_db)) -> MessageOut:
    company = _get_company_or_404(db, company_id)
    CompanyRepository(db).delete(company)
    logger.info("Company %s deleted", company_id)
    return MessageOut(message="Company deleted")


@router.get("/{company_id}/jobs", response_model=list[JobOut])
def list_company_jobs(company_id: int, db: Session = Depends(get_db)) -> list[Job]:
    company = _get_company_or_404(db, company_id)
    return JobRepository(db).list_for_company(company.id)


@router.get("/{company_id}/job-requests", response_model=list[JobRequestDetailOut])
def list_company_job_requests(company_id: int, db: Session = Depends(get_db)) -> list[JobRequest]:
    company = _get_company_or_404(db, company_id)
    return JobRequestRepository(db).list_for_company(company.id)
