from __future__ import annotations

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from studylink.api.params import PageParams, page_out, page_params
from studylink.database import get_db, utcnow
from studylink.errors import NotFound
from studylink.models.school import School, SchoolOwner
from studylink.models.user import User
from studylink.repositories.base import paginate
from studylink.repositories.schools import SchoolFilters, SchoolRepository
from studylink.repositories.users import UserRepository
from studylink.schemas.common import MessageOut, PageOut
from studylink.schemas.school import SchoolCreate, SchoolOut, SchoolUpdate
from studylink.validation.schools import validate_school_data


logger = logging.getLogger(__name__)

router = APIRouter()


def _get_school_or_404(db: Session, school_id: int) -> School:
    school = SchoolRepository(db).get_active(school_id)
    if school is None:
        raise NotFound("School not found")
    return school


@router.get("", response_model=PageOut[SchoolOut])
def list_schools(
    search: str | None = Query(None),
    is_active: bool | None = Query(None),
    domain_id: int | None = Query(None),
    order_by: Literal["name", "created_at", "updated_at"] = Query("name"),
    order: Literal["asc", "desc"] = Query("asc"),
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
) -> dict:
    filters = SchoolFilters(search=search, is_active=is_active, domain_id=domain_id, order_by=order_by, order=order)
    page = paginate(SchoolRepository(db).search(filters), paging.page, paging.limit)
    return page_out(page, SchoolOut)


@router.post("", response_model=SchoolOut, status_code=201)
def create_school(payload: SchoolCreate, db: Session = Depends(get_db)) -> School:
    data = payload.model_dump()
    result = validate_school_data(db, data)
    owner_data = data.get("owner") or {}
    if not result.has_error("owner.email") and UserRepository(db).get_by_email(owner_data["email"]):
        result.add("owner.email", "A user with this email already exists")
    result.raise_if_invalid()

    # school, owner account and ownership link are committed together
    school = School(name=data["name"].strip(), domain_id=data["domain_id"], logo=data.get("logo"), is_active=True)
    owner = User(
        email=owner_data["email"].strip().lower(),
        firstname=owner_data.get("firstname"),
        lastname=owner_data.get("lastname"),
        type="school_owner",
    )
    db.add_all([school, owner])
    db.flush()
    db.add(SchoolOwner(user_id=owner.id, school_id=school.id))
    db.commit()
    db.refresh(school)
    logger.info("School %s created with owner user %s", school.id, owner.id)
    return school


@router.get("/{school_id}", response_model=SchoolOut)
def get_school(school_id: int, db: Session = Depends(get_db)) -> School:
    return _get_school_or_404(db, school_id)


@router.put("/{school_id}", response_model=SchoolOut)
def update_school(school_id: int, payload: SchoolUpdate, db: Session = Depends(get_db)) -> School:
    school = _get_school_or_404(db, school_id)
    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    validate_school_data(db, data, is_update=True).raise_if_invalid()

    if data.get("name"):
        data["name"] = data["name"].strip()
    for key, value in data.items():
        setattr(school, key, value)
    return SchoolRepository(db).add(school)


@router.delete("/{school_id}", response_model=MessageOut)
def delete_school(school_id: int, db: Session = Depends(get_db)) -> MessageOut:
    school = _get_school_or_404(db, school_id)
    school.deleted_at = utcnow()
    school.is_active = False
    SchoolRepository(db).add(school)
    logger.info("School %s soft-deleted", school_id)
    return MessageOut(message="School deleted")


@router.patch("/{school_id}/toggle-status", response_model=SchoolOut)
def toggle_school_status(school_id: int, db: Session = Depends(get_db)) -> School:
    school = _get_school_or_404(db, school_id)
    school.is_active = not school.is_active
    logger.info("School %s is_active=%s", school_id, school.is_active)
    return SchoolRepository(db).add(school)
