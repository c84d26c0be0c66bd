from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from studylink.api.params import PageParams, page_out, page_params
from studylink.database import get_db
from studylink.errors import NotFound
from studylink.models.company import CompanyOwner
from studylink.models.user import User
from studylink.repositories.base import paginate
from studylink.repositories.companies import CompanyOwnerRepository, OwnerFilters
from studylink.schemas.common import MessageOut, PageOut
from studylink.schemas.owner import CompanyOwnerCreate, CompanyOwnerOut, CompanyOwnerUpdate
from studylink.validation.companies import validate_company_owner_data


logger = logging.getLogger(__name__)

router = APIRouter()


def _get_owner_or_404(db: Session, owner_id: int) -> CompanyOwner:
    owner = CompanyOwnerRepository(db).get(owner_id)
    if owner is None:
        raise NotFound("Company owner not found")
    return owner


@router.get("", response_model=PageOut[CompanyOwnerOut])
def list_company_owners(
    company_id: int | None = Query(None),
    user_id: int | None = Query(None),
    search: str | None = Query(None),
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
) -> dict:
    filters = OwnerFilters(company_id=company_id, user_id=user_id, search=search)
    page = paginate(CompanyOwnerRepository(db).search(filters), paging.page, paging.limit)
    return page_out(page, CompanyOwnerOut)


@router.post("", response_model=CompanyOwnerOut, status_code=201)
def create_company_owner(payload: CompanyOwnerCreate, db: Session = Depends(get_db)) -> CompanyOwner:
    data = payload.model_dump()
    validate_company_owner_data(db, data).raise_if_invalid()

    owner = CompanyOwner(user_id=data["user_id"], company_id=data["company_id"])
    db.add(owner)
    db.get(User, data["user_id"]).type = "company_owner"
    db.commit()
    db.refresh(owner)
    logger.info("User %s now owns company %s", owner.user_id, owner.company_id)
    return owner


@router.get("/{owner_id}", response_model=CompanyOwnerOut)
def get_company_owner(owner_id: int, db: Session = Depends(get_db)) -> CompanyOwner:
    return _get_owner_or_404(db, owner_id)


@router.put("/{owner_id}", response_model=CompanyOwnerOut)
def update_company_owner(owner_id: int, payload: CompanyOwnerUpdate, db: Session = Depends(get_db)) -> CompanyOwner:
    owner = _get_owner_or_404(db, owner_id)
    data = payload.model_dump(exclude_unset=True)
    validate_company_owner_data(db, data, is_update=True, owner_id=owner.id).raise_if_invalid()

    for key in ("user_id", "company_id"):
        if key in data:
            setattr(owner, key, data[key])
    return CompanyOwnerRepository(db).add(owner)


@router.delete("/{owner_id}", response_model=MessageOut)
def delete_company_owner(owner_id: int, db: Session = Depends(get_db)) -> MessageOut:
    owner = _get_owner_or_404(db, owner_id)
    CompanyOwnerRepository(db).delete(owner)
    logger.info("Company owner %s deleted", owner_id)
    return MessageOut(message="Company owner deleted")
