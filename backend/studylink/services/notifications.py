from __future__ import annotations

import logging

import httpx

from studylink.config import settings
from studylink.models.job import Job
from studylink.models.job_request import JobRequest
from studylink.models.student import Student
from studylink.models.user import User
from studylink.services.email_templates import templates
from studylink.services.mailer import EmailMessage, Mailer


logger = logging.getLogger(__name__)


def application_url(job_request: JobRequest) -> str:
    return f"{settings.app_base_url.rstrip('/')}/company/applications/{job_request.id}"


def build_application_email(
    recipient: User,
    job_request: JobRequest,
    job: Job,
    student: Student,
) -> EmailMessage:
    html = templates.render(
        "job_application",
        company_name=job.company.name,
        job_title=job.name,
        student_name=student.user.full_name,
        student_email=student.user.email,
        subject=job_request.subject or "",
        message=job_request.message or "",
        application_url=application_url(job_request),
    )
    return EmailMessage(to=recipient.email, subject=f"New application for: {job.name}", html=html)


def notify_company_owners(
    mailer: Mailer,
    owners: list[User],
    job_request: JobRequest,
    job: Job,
    student: Student,
) -> int:
    """Emails every owner of the job's company. Returns the number of emails handed to the provider."""
    sent = 0
    for owner in owners:
        message = build_application_email(owner, job_request, job, student)
        try:
            if mailer.send(message):
                sent += 1
        except httpx.HTTPError:
            # the application is already stored, a failed notification must not undo it
            logger.exception("Failed to notify %s about job request %s", owner.email, job_request.id)
    return sent


def send_signin_link(mailer: Mailer, user: User, token: str) -> bool:
    signin_url = f"{settings.app_base_url.rstrip('/')}/verify-request?token={token}"
    html = templates.render(
        "signin",
        firstname=user.firstname,
        signin_url=signin_url,
        ttl_minutes=max(1, settings.magic_link_ttl_seconds // 60),
    )
    return mailer.send(EmailMessage(to=user.email, subject="Sign in to StudyLink", html=html))
