from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from studylink.api.params import PageParams, page_out, page_params
from studylink.database import get_db
from studylink.errors import NotFound
from studylink.models.experience import Experience
from studylink.models.student import Student
from studylink.repositories.base import paginate
from studylink.repositories.experiences import ExperienceFilters, ExperienceRepository
from studylink.repositories.students import StudentRepository
from studylink.schemas.common import MessageOut, PageOut
from studylink.schemas.experience import ExperienceCreate, ExperienceOut, ExperienceUpdate
from studylink.validation.experiences import validate_experience_data


logger = logging.getLogger(__name__)

router = APIRouter()

EXPERIENCE_FIELDS = ("position", "company", "type", "start_date", "end_date")


def _naive_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _normalized(data: dict) -> dict:
    for key in ("start_date", "end_date"):
        if key in data:
            data[key] = _naive_utc(data[key])
    for key in ("position", "company"):
        if isinstance(data.get(key), str):
            data[key] = data[key].strip()
    return data


def _get_student_or_404(db: Session, student_id: int) -> Student:
    student = StudentRepository(db).get(student_id)
    if student is None:
        raise NotFound("Student not found")
    return student


def _get_experience_or_404(db: Session, student_id: int, experience_id: int) -> Experience:
    _get_student_or_404(db, student_id)
    experience = ExperienceRepository(db).get_for_student(student_id, experience_id)
    if experience is None:
        raise NotFound("Experience not found")
    return experience


@router.get("", response_model=PageOut[ExperienceOut])
def list_experiences(
    student_id: int,
    type: str | None = Query(None),
    company: str | None = Query(None),
    search: str | None = Query(None),
    start_date_after: datetime | None = Query(None),
    start_date_before: datetime | None = Query(None),
    order_by: str = Query("start_date"),
    order: str = Query("desc", pattern="^(asc|desc)$"),
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
) -> dict:
    student = _get_student_or_404(db, student_id)
    filters = ExperienceFilters(
        type=type,
        company=company,
        search=search,
        start_date_after=_naive_utc(start_date_after),
        start_date_before=_naive_utc(start_date_before),
        order_by=order_by,
        order=order,
    )
    page = paginate(ExperienceRepository(db).search(student.id, filters), paging.page, paging.limit)
    return page_out(page, ExperienceOut)


@router.post("", response_model=ExperienceOut, status_code=201)
def create_experience(student_id: int, payload: ExperienceCreate, db: Session = Depends(get_db)) -> Experience:
    student = _get_student_or_404(db, student_id)
    data = _normalized(payload.model_dump())
    validate_experience_data(data).raise_if_invalid()

    experience = Experience(student_id=student.id)
    for key in EXPERIENCE_FIELDS:
        setattr(experience, key, data.get(key))
    experience = ExperienceRepository(db).add(experience)
    logger.info("Experience %s added for student %s", experience.id, student.id)
    return experience


@router.get("/{experience_id}", response_model=ExperienceOut)
def get_experience(student_id: int, experience_id: int, db: Session = Depends(get_db)) -> Experience:
    return _get_experience_or_404(db, student_id, experience_id)


@router.put("/{experience_id}", response_model=ExperienceOut)
def update_experience(
    student_id: int,
    experience_id: int,
    payload: ExperienceUpdate,
    db: Session = Depends(get_db),
) -> Experience:
    experience = _get_experience_or_404(db, student_id, experience_id)
    data = _normalized(payload.model_dump(exclude_unset=True))
    validate_experience_data(data, is_update=True, experience=experience).raise_if_invalid()

    for key in EXPERIENCE_FIELDS:
        if key in data:
            setattr(experience, key, data[key])
    return ExperienceRepository(db).add(experience)


@router.delete("/{experience_id}", response_model=MessageOut)
def delete_experience(student_id: int, experience_id: int, db: Session = Depends(get_db)) -> MessageOut:
    experience = _get_experience_or_404(db, student_id, experience_id)
    ExperienceRepository(db).delete(experience)
    logger.info("Experience %s deleted for student %s", experience_id, student_id)
    return MessageOut(message="Experience deleted")
