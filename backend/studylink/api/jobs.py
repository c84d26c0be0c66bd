from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from studylink.api.params import PageParams, page_out, page_params, skills_param
from studylink.database import get_db, utcnow
from studylink.errors import Gone, NotFound
from studylink.models.job import Job
from studylink.repositories.base import paginate
from studylink.repositories.jobs import JobFilters, JobRepository
from studylink.schemas.common import MessageOut, PageOut
from studylink.schemas.job import JobCreate, JobOut, JobUpdate
from studylink.validation.jobs import validate_job_data


logger = logging.getLogger(__name__)

router = APIRouter()

JOB_FIELDS = ("name", "description", "featured_image", "skills", "type", "availability")


def _get_job_or_error(db: Session, job_id: int) -> Job:
    job = JobRepository(db).get(job_id)
    if job is None:
        raise NotFound("Job not found")
    if job.is_deleted:
        raise Gone("This job has been deleted")
    return job


@router.get("", response_model=PageOut[JobOut])
def list_jobs(
    company_id: int | None = Query(None),
    type: str | None = Query(None),
    availability: str | None = Query(None),
    search: str | None = Query(None),
    skills: list[str] = Depends(skills_param),
    paging: PageParams = Depends(page_params),
    db: Session = Depends(get_db),
) -> dict:
    filters = JobFilters(
        company_id=company_id,
        type=type,
        availability=availability,
        skills=skills,
        search=search,
    )
    page = paginate(JobRepository(db).search(filters), paging.page, paging.limit)
    return page_out(page, JobOut)


@router.post("", response_model=JobOut, status_code=201)
def create_job(payload: JobCreate, db: Session = Depends(get_db)) -> Job:
    data = payload.model_dump()
    validate_job_data(db, data).raise_if_invalid()

    job = Job(company_id=data["company_id"])
    for key in JOB_FIELDS:
        setattr(job, key, data.get(key))
    job.name = job.name.strip()
    job.skills = data.get("skills") or []
    job = JobRepository(db).add(job)
    logger.info("Job %s created for company %s", job.id, job.company_id)
    return job


@router.get("/{job_id}", response_model=JobOut)
def get_job(job_id: int, db: Session = Depends(get_db)) -> Job:
    return _get_job_or_error(db, job_id)


@router.put("/{job_id}", response_model=JobOut)
def update_job(job_id: int, payload: JobUpdate, db: Session = Depends(get_db)) -> Job:
    job = _get_job_or_error(db, job_id)
    data = payload.model_dump(exclude_unset=True)
    validate_job_data(db, data, is_update=True).raise_if_invalid()

    for key in JOB_FIELDS:
        if key not in data:
            continue
        if key == "skills":
            job.skills = data["skills"] or []
        elif key == "description" and data[key] is None:
            continue
        else:
            setattr(job, key, data[key])
    return JobRepository(db).add(job)


@router.delete("/{job_id}", response_model=MessageOut)
def delete_job(job_id: int, db: Session = Depends(get_db)) -> MessageOut:
    job = _get_job_or_error(db, job_id)
    job.deleted_at = utcnow()
    JobRepository(db).add(job)
    logger.info("Job %s soft-deleted", job_id)
    return MessageOut(message="Job deleted")
