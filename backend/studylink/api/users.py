from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studylink.auth import Principal, get_current_principal
from studylink.database import get_db
from studylink.errors import NotFound
from studylink.models.job_request import JobRequest
from studylink.models.user import User
from studylink.repositories.job_requests import JobRequestRepository
from studylink.repositories.users import UserRepository
from studylink.schemas.common import MessageOut
from studylink.schemas.job_request import JobRequestDetailOut
from studylink.schemas.user import CurrentUserOut, UserCreate, UserOut, UserUpdate
from studylink.validation.users import validate_user_data


logger = logging.getLogger(__name__)

router = APIRouter()


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = UserRepository(db).get_active(user_id)
    if user is None:
        raise NotFound("User not found")
    return user


@router.get("", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db)) -> list[User]:
    return UserRepository(db).list_active()


@router.post("", response_model=UserOut, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)) -> User:
    data = payload.model_dump()
    validate_user_data(db, data).raise_if_invalid()
    user = User(
        email=data["email"].strip().lower(),
        firstname=data["firstname"].strip(),
        lastname=data["lastname"].strip(),
        profile_picture=data.get("profile_picture"),
    )
    user = UserRepository(db).add(user)
    logger.info("User %s created", user.id)
    return user


@router.get("/current", response_model=CurrentUserOut)
def current_user(db: Session = Depends(get_db), principal: Principal = Depends(get_current_principal)) -> User:
    return _get_user_or_404(db, principal.user_id)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)) -> User:
    return _get_user_or_404(db, user_id)


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)) -> User:
    user = _get_user_or_404(db, user_id)
    data = payload.model_dump(exclude_unset=True)
    validate_user_data(db, data, is_update=True, user_id=user.id).raise_if_invalid()

    if "email" in data:
        data["email"] = data["email"].strip().lower()
    for key, value in data.items():
        setattr(user, key, value)
    return UserRepository(db).add(user)


@router.delete("/{user_id}", response_model=MessageOut)
def delete_user(user_id: int, db: Session = Depends(get_db)) -> MessageOut:
    user = _get_user_or_404(db, user_id)
    UserRepository(db).delete(user)
    logger.info("User %s deleted", user_id)
    return MessageOut(message="User deleted")


@router.get("/{user_id}/job-requests", response_model=list[JobRequestDetailOut])
def list_user_job_requests(user_id: int, db: Session = Depends(get_db)) -> list[JobRequest]:
    user = _get_user_or_404(db, user_id)
    if user.student is None:
        return []
    return JobRequestRepository(db).list_for_student(user.student.id)
