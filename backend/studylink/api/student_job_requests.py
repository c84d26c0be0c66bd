from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studylink.auth import Principal, get_current_principal
from studylink.database import get_db
from studylink.models.job_request import JobRequest
from studylink.schemas.common import SuccessOut
from studylink.schemas.job_request import (
    JobApplicationCreate,
    JobRequestDetailOut,
    JobRequestOut,
    JobRequestStatusUpdate,
)
from studylink.services.job_requests import JobRequestService
from studylink.services.mailer import Mailer, get_mailer


router = APIRouter()


@router.get("", response_model=list[JobRequestDetailOut])
def list_my_job_requests(
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> list[JobRequest]:
    return JobRequestService(db).list_for_principal(principal)


@router.post("", response_model=JobRequestOut, status_code=201)
def apply_for_job(
    payload: JobApplicationCreate,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
    mailer: Mailer = Depends(get_mailer),
) -> JobRequest:
    service = JobRequestService(db, mailer=mailer)
    return service.apply(principal, payload.job_id, subject=payload.subject, message=payload.message)


@router.get("/{request_id}", response_model=JobRequestDetailOut)
def get_my_job_request(request_id: int, db: Session = Depends(get_db)) -> JobRequest:
    return JobRequestService(db).get(request_id)


@router.put("/{request_id}", response_model=JobRequestOut)
def update_my_job_request(
    request_id: int,
    payload: JobRequestStatusUpdate,
    db: Session = Depends(get_db),
) -> JobRequest:
    return JobRequestService(db).update_status(request_id, payload.model_dump(exclude_unset=True))


@router.delete("/{request_id}", response_model=SuccessOut)
def delete_my_job_request(
    request_id: int,
    db: Session = Depends(get_db),
    principal: Principal = Depends(get_current_principal),
) -> SuccessOut:
    JobRequestService(db).withdraw(principal, request_id)
    return SuccessOut()
