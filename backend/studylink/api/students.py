from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from studylink.api.params import PageParams, page_out, page_params, skills_param
from studylink.auth import Principal, get_current_principal
from studylink.database import get_db
from studylink.errors import NotFound
from studylink.models.student import Student
from studylink.repositories.base import paginate
from studylink.repositories.students import StudentFilters, StudentRepository
from studylink.repositories.users import UserRepository
from studylink.schemas.common import MessageOut, PageOut
from studylink.schemas.student import (
    StudentCreate,
    StudentOut,
    StudentProfileCreate,
    StudentProfileUpdate,
    StudentUpdate,
)
from studylink.validation.students import validate_student_data
from studylink.validation.users import validate_user_data


logger = logging.getLogger(__name__)

router = APIRouter()

STUDENT_FIELDS = (
    "student_email",
    "status",
    "skills",
    "apprenticeship_rhythm",
    "description",
    "curriculum_vitae",
    "previous_companies",
    "availability",
)
NAME_FIELDS = ("firstname", "lastname")


def _get_student_or_404(db: Session, student_id: int) -> Student:
    student = StudentRepository(db).get(student_id)
    if student is None:
        raise NotFound("Student not found")
    return student


def _apply_student_fields(student: Student, data: dict) -> None:
    for key in STUDENT_FIELDS:
        if key not in data:
            continue
        value = data[key]
        if key == "student_email" and value:
            value = value.strip().lower()
        setattr(student, key, value)


@router.get("", response_model=PageOut[StudentOut])
def list_students(
    school_id: int | None = Query(None),
    status: str | None = Query(None),
    search: str | None = Query(None),
    availability: bool | None = Query(None),
    skills: list[str] = Depends(skills_param),
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
) -> dict:
    filters = StudentFilters(
        school_id=school_id,
        status=status,
        search=search,
        skills=skills,
        availability=availability,
    )
    page = paginate(StudentRepository(db).search(filters), paging.page, paging.limit)
    return page_out(page, StudentOut)


@router.post("", response_model=StudentOut, status_code=201)
def create_student(payload: StudentCreate, db: Session = Depends(get_db)) -> Student:
    data = payload.model_dump()
    validate_student_data(db, data).raise_if_invalid()

    student = Student(user_id=data["user_id"], school_id=data["school_id"])
    _apply_student_fields(student, data)
    student = StudentRepository(db).add(student)
    logger.info("Student %s created for user %s", student.id, student.user_id)
    return student


@router.post("/profile", response_model=StudentOut, status_code=201)
def create_profile(
    payload: StudentProfileCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> Student:
    data = payload.model_dump()
    data["user_id"] = principal.user_id

    result = validate_user_data(db, {key: data[key] for key in NAME_FIELDS}, is_update=True)
    result.errors.extend(validate_student_data(db, data, optional=("previous_companies",)).errors)
    result.raise_if_invalid()

    user = UserRepository(db).get_active(principal.user_id)
    user.firstname = data["firstname"].strip()
    user.lastname = data["lastname"].strip()
    user.type = "student"
    user.profile_completed = True

    student = Student(user_id=user.id, school_id=data["school_id"])
    _apply_student_fields(student, data)
    student = StudentRepository(db).add(student)
    logger.info("Student profile %s completed by user %s", student.id, user.id)
    return student


@router.put("/profile", response_model=StudentOut)
def update_profile(
    payload: StudentProfileUpdate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> Student:
    students = StudentRepository(db)
    student = students.get_by_user_id(principal.user_id)
    if student is None:
        raise NotFound("Student profile not found")

    data = payload.model_dump(exclude_unset=True)
    names = {key: data[key] for key in NAME_FIELDS if key in data}
    result = validate_user_data(db, names, is_update=True)
    result.errors.extend(validate_student_data(db, data, is_update=True, student_id=student.id).errors)
    result.raise_if_invalid()

    for key, value in names.items():
        setattr(student.user, key, value.strip())
    _apply_student_fields(student, data)
    return students.add(student)


@router.get("/{student_id}", response_model=StudentOut)
def get_student(student_id: int, db: Session = Depends(get_db)) -> Student:
    return _get_student_or_404(db, student_id)


@router.put("/{student_id}", response_model=StudentOut)
def update_student(student_id: int, payload: StudentUpdate, db: Session = Depends(get_db)) -> Student:
    student = _get_student_or_404(db, student_id)
    data = payload.model_dump(exclude_unset=True)
    validate_student_data(db, data, is_update=True, student_id=student.id).raise_if_invalid()
    _apply_student_fields(student, data)
    return StudentRepository(db).add(student)


@router.delete("/{student_id}", response_model=MessageOut)
def delete_student(student_id: int, db: Session = Depends(get_db)) -> MessageOut:
    student = _get_student_or_404(db, student_id)
    StudentRepository(db).delete(student)
    logger.info("Student %s deleted", student_id)
    return MessageOut(message="Student deleted")
