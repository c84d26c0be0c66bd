from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studylink.database import get_db
from studylink.errors import Conflict, NotFound
from studylink.models.school import AuthorizedSchoolDomain
from studylink.repositories.schools import SchoolDomainRepository, SchoolRepository
from studylink.schemas.common import MessageOut
from studylink.schemas.school import (
    SchoolDomainCreate,
    SchoolDomainDetailOut,
    SchoolDomainOut,
    SchoolDomainUpdate,
    SchoolSummaryOut,
    ValidateSchoolEmailRequest,
    ValidateSchoolEmailResponse,
)
from studylink.validation.schools import validate_school_domain_data


logger = logging.getLogger(__name__)

router = APIRouter()


def _get_domain_or_404(db: Session, domain_id: int) -> AuthorizedSchoolDomain:
    domain = SchoolDomainRepository(db).get(domain_id)
    if domain is None:
        raise NotFound("School domain not found")
    return domain


def _detail(domain: AuthorizedSchoolDomain) -> SchoolDomainDetailOut:
    active = [school for school in domain.schools if school.deleted_at is None]
    return SchoolDomainDetailOut(id=domain.id, domain=domain.domain, school_count=len(active))


@router.get("", response_model=list[SchoolDomainDetailOut])
def list_domains(db: Session = Depends(get_db)) -> list[SchoolDomainDetailOut]:
    return [_detail(domain) for domain in SchoolDomainRepository(db).list_all()]


@router.post("", response_model=SchoolDomainOut, status_code=201)
def create_domain(payload: SchoolDomainCreate, db: Session = Depends(get_db)) -> AuthorizedSchoolDomain:
    data = payload.model_dump()
    validate_school_domain_data(db, data).raise_if_invalid()
    domain = SchoolDomainRepository(db).add(AuthorizedSchoolDomain(domain=data["domain"].strip().lower()))
    logger.info("School domain %s authorized", domain.domain)
    return domain


@router.post("/validate-school-email", response_model=ValidateSchoolEmailResponse)
def validate_school_email(
    payload: ValidateSchoolEmailRequest,
    db: Session = Depends(get_db),
) -> ValidateSchoolEmailResponse:
    _, _, domain_name = payload.email.strip().lower().rpartition("@")
    if not domain_name:
        return ValidateSchoolEmailResponse(is_valid=False)

    domain = SchoolDomainRepository(db).get_by_domain(domain_name)
    if domain is None:
        return ValidateSchoolEmailResponse(is_valid=False, domain=domain_name)

    schools = SchoolRepository(db).list_for_domain(domain.id)
    return ValidateSchoolEmailResponse(
        is_valid=bool(schools),
        domain=domain.domain,
        schools=[SchoolSummaryOut.model_validate(school) for school in schools],
    )


@router.get("/{domain_id}", response_model=SchoolDomainDetailOut)
def get_domain(domain_id: int, db: Session = Depends(get_db)) -> SchoolDomainDetailOut:
    return _detail(_get_domain_or_404(db, domain_id))


@router.put("/{domain_id}", response_model=SchoolDomainOut)
def update_domain(
    domain_id: int,
    payload: SchoolDomainUpdate,
    db: Session = Depends(get_db),
) -> AuthorizedSchoolDomain:
    domain = _get_domain_or_404(db, domain_id)
    data = payload.model_dump(exclude_unset=True)
    validate_school_domain_data(db, data, domain_id=domain.id).raise_if_invalid()
    if data.get("domain"):
        domain.domain = data["domain"].strip().lower()
    return SchoolDomainRepository(db).add(domain)


@router.delete("/{domain_id}", response_model=MessageOut)
def delete_domain(domain_id: int, db: Session = Depends(get_db)) -> MessageOut:
    domain = _get_domain_or_404(db, domain_id)
    if domain.schools:
        raise Conflict("This domain is still used by schools")
    SchoolDomainRepository(db).delete(domain)
    logger.info("School domain %s removed", domain_id)
    return MessageOut(message="School domain deleted")
