from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from studylink.auth import Principal
from studylink.errors import Conflict, FieldError, NotFound, PermissionDenied, ValidationFailed
from studylink.models.job_request import JobRequest, JobRequestStatus
from studylink.models.student import Student
from studylink.repositories.companies import CompanyRepository
from studylink.repositories.job_requests import JobRequestRepository
from studylink.repositories.jobs import JobRepository
from studylink.repositories.students import StudentRepository
from studylink.services.mailer import Mailer
from studylink.services.notifications import notify_company_owners
from studylink.validation.job_requests import validate_job_request_data, validate_job_request_update_data


logger = logging.getLogger(__name__)


class JobRequestService:
    """Lifecycle of a student's application to a job.

    A request starts PENDING and a company moves it to ACCEPTED or REJECTED.
    Any status may be set from any other status. Students withdraw their own
    requests by deleting them. Administrators soft-delete.
    """

    def __init__(self, db: Session, mailer: Mailer | None = None) -> None:
        self.db = db
        self.mailer = mailer
        self.requests = JobRequestRepository(db)
        self.jobs = JobRepository(db)
        self.students = StudentRepository(db)

    def student_for(self, principal: Principal, action: str = "apply for jobs") -> Student:
        student = self.students.get_by_user_id(principal.user_id)
        if student is None:
            raise PermissionDenied(f"Only students can {action}")
        return student

    def get(self, request_id: int) -> JobRequest:
        job_request = self.requests.get_active(request_id)
        if job_request is None:
            raise NotFound("Job request not found")
        return job_request

    def apply(
        self,
        principal: Principal,
        job_id: int | None,
        subject: str | None = None,
        message: str | None = None,
    ) -> JobRequest:
        if job_id is None:
            raise ValidationFailed([FieldError("job_id", "Job id is required")], message="Job id is required")

        student = self.student_for(principal)
        job = self.jobs.get_active(job_id)
        if job is None:
            raise NotFound("Job not found")

        if self.requests.find_active(student.id, job.id) is not None:
            raise Conflict("You have already applied for this job")

        job_request = self.requests.add(
            JobRequest(
                student_id=student.id,
                job_id=job.id,
                status=JobRequestStatus.PENDING.value,
                subject=subject,
                message=message,
            )
        )
        logger.info("Student %s applied to job %s (job request %s)", student.id, job.id, job_request.id)

        if self.mailer is not None:
            owners = CompanyRepository(self.db).owner_users(job.company_id)
            sent = notify_company_owners(self.mailer, owners, job_request, job, student)
            logger.info("Job request %s notified %s/%s company owners", job_request.id, sent, len(owners))
        return job_request

    def create(self, data: dict) -> JobRequest:
        validate_job_request_data(self.db, data).raise_if_invalid()
        if self.requests.find_active(data["student_id"], data["job_id"]) is not None:
            raise Conflict("This student has already applied for this job")

        job_request = self.requests.add(
            JobRequest(
                student_id=data["student_id"],
                job_id=data["job_id"],
                status=data["status"],
                subject=data.get("subject"),
                message=data.get("message"),
            )
        )
        logger.info("Job request %s created for student %s", job_request.id, job_request.student_id)
        return job_request

    def update_status(self, request_id: int, data: dict) -> JobRequest:
        # TODO: restrict to owners of the job's company once product confirms the rule
        validate_job_request_update_data(data).raise_if_invalid()
        job_request = self.get(request_id)
        if data.get("status") is not None:
            previous = job_request.status
            job_request.status = data["status"]
            logger.info("Job request %s status %s -> %s", job_request.id, previous, job_request.status)
        return self.requests.add(job_request)

    def withdraw(self, principal: Principal, request_id: int) -> None:
        student = self.student_for(principal, action="delete their job requests")
        job_request = self.requests.get(request_id)
        if job_request is None:
            raise NotFound("Job request not found")
        if job_request.student_id != student.id:
            raise PermissionDenied("You can only delete your own job requests")
        self.requests.delete(job_request)
        logger.info("Student %s deleted job request %s", student.id, request_id)

    def soft_delete(self, request_id: int) -> None:
        job_request = self.get(request_id)
        self.requests.soft_delete(job_request)
        logger.info("Job request %s soft-deleted", request_id)

    def list_for_principal(self, principal: Principal) -> list[JobRequest]:
        student = self.student_for(principal, action="view job requests")
        return self.requests.list_for_student(student.id)
