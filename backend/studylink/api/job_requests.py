from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from studylink.database import get_db
from studylink.models.job_request import JobRequest
from studylink.schemas.common import MessageOut
from studylink.schemas.job_request import JobRequestCreate, JobRequestOut, JobRequestStatusUpdate
from studylink.services.job_requests import JobRequestService


router = APIRouter()


@router.get("", response_model=list[JobRequestOut])
def list_job_requests(db: Session = Depends(get_db)) -> list[JobRequest]:
    return JobRequestService(db).requests.list_active()


@router.post("", response_model=JobRequestOut, status_code=201)
def create_job_request(payload: JobRequestCreate, db: Session = Depends(get_db)) -> JobRequest:
    return JobRequestService(db).create(payload.model_dump())


@router.get("/{request_id}", response_model=JobRequestOut)
def get_job_request(request_id: int, db: Session = Depends(get_db)) -> JobRequest:
    return JobRequestService(db).get(request_id)


@router.put("/{request_id}", response_model=JobRequestOut)
def update_job_request(
    request_id: int,
    payload: JobRequestStatusUpdate,
    db: Session = Depends(get_db),
) -> JobRequest:
    return JobRequestService(db).update_status(request_id, payload.model_dump(exclude_unset=True))


@router.delete("/{request_id}", response_model=MessageOut)
def delete_job_request(request_id: int, db: Session = Depends(get_db)) -> MessageOut:
    JobRequestService(db).soft_delete(request_id)
    return MessageOut(message="Job request deleted")
