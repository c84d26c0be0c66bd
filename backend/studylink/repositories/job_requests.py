from __future__ import annotations

from studylink.database import utcnow
from studylink.models.job import Job
from studylink.models.job_request import JobRequest
from studylink.repositories.base import Repository


class JobRequestRepository(Repository[JobRequest]):
    model = JobRequest

    def get_active(self, request_id: int) -> JobRequest | None:
        return (
            self.db.query(JobRequest)
            .filter(JobRequest.id == request_id, JobRequest.deleted_at.is_(None))
            .first()
        )

    def find_active(self, student_id: int, job_id: int) -> JobRequest | None:
        return (
            self.db.query(JobRequest)
            .filter(
                JobRequest.student_id == student_id,
                JobRequest.job_id == job_id,
                JobRequest.deleted_at.is_(None),
            )
            .first()
        )

    def list_active(self) -> list[JobRequest]:
        return (
            self.db.query(JobRequest)
            .filter(JobRequest.deleted_at.is_(None))
            .order_by(JobRequest.created_at.desc(), JobRequest.id.desc())
            .all()
        )

    def list_for_student(self, student_id: int) -> list[JobRequest]:
        return (
            self.db.query(JobRequest)
            .filter(JobRequest.student_id == student_id, JobRequest.deleted_at.is_(None))
            .order_by(JobRequest.created_at.desc(), JobRequest.id.desc())
            .all()
        )

    def list_for_company(self, company_id: int) -> list[JobRequest]:
        return (
            self.db.query(JobRequest)
            .join(Job, Job.id == JobRequest.job_id)
            .filter(
                Job.company_id == company_id,
                Job.deleted_at.is_(None),
                JobRequest.deleted_at.is_(None),
            )
            .order_by(JobRequest.created_at.desc(), JobRequest.id.desc())
            .all()
        )

    def soft_delete(self, job_request: JobRequest) -> None:
        job_request.deleted_at = utcnow()
        self.db.add(job_request)
        self.db.commit()
