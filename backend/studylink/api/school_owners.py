from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from studylink.api.params import PageParams, page_out, page_params
from studylink.database import get_db
from studylink.errors import NotFound
from studylink.models.school import SchoolOwner
from studylink.models.user import User
from studylink.repositories.base import paginate
from studylink.repositories.companies import OwnerFilters
from studylink.repositories.schools import SchoolOwnerRepository
from studylink.schemas.common import MessageOut, PageOut
from studylink.schemas.owner import SchoolOwnerCreate, SchoolOwnerOut, SchoolOwnerUpdate
from studylink.validation.schools import validate_school_owner_data


logger = logging.getLogger(__name__)

router = APIRouter()


def _get_owner_or_404(db: Session, owner_id: int) -> SchoolOwner:
    owner = SchoolOwnerRepository(db).get(owner_id)
    if owner is None:
        raise NotFound("School owner not found")
    return owner


@router.get("", response_model=PageOut[SchoolOwnerOut])
def list_school_owners(
    school_id: int | None = Query(None),
    user_id: int | None = Query(None),
    search: str | None = Query(None),
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
) -> dict:
    filters = OwnerFilters(school_id=school_id, user_id=user_id, search=search)
    page = paginate(SchoolOwnerRepository(db).search(filters), paging.page, paging.limit)
    return page_out(page, SchoolOwnerOut)


@router.post("", response_model=SchoolOwnerOut, status_code=201)
def create_school_owner(payload: SchoolOwnerCreate, db: Session = Depends(get_db)) -> SchoolOwner:
    data = payload.model_dump()
    validate_school_owner_data(db, data).raise_if_invalid()

    owner = SchoolOwner(user_id=data["user_id"], school_id=data["school_id"])
    db.add(owner)
    db.get(User, data["user_id"]).type = "school_owner"
    db.commit()
    db.refresh(owner)
    logger.info("User %s now owns school %s", owner.user_id, owner.school_id)
    return owner


@router.get("/{owner_id}", response_model=SchoolOwnerOut)
def get_school_owner(owner_id: int, db: Session = Depends(get_db)) -> SchoolOwner:
    return _get_owner_or_404(db, owner_id)


@router.put("/{owner_id}", response_model=SchoolOwnerOut)
def update_school_owner(owner_id: int, payload: SchoolOwnerUpdate, db: Session = Depends(get_db)) -> SchoolOwner:
    owner = _get_owner_or_404(db, owner_id)
    data = payload.model_dump(exclude_unset=True)
    validate_school_owner_data(db, data, is_update=True, owner_id=owner.id).raise_if_invalid()

    for key in ("user_id", "school_id"):
        if key in data:
            setattr(owner, key, data[key])
    return SchoolOwnerRepository(db).add(owner)


@router.delete("/{owner_id}", response_model=MessageOut)
def delete_school_owner(owner_id: int, db: Session = Depends(get_db)) -> MessageOut:
    owner = _get_owner_or_404(db, owner_id)
    SchoolOwnerRepository(db).delete(owner)
    logger.info("School owner %s deleted", owner_id)
    return MessageOut(message="School owner deleted")
