from __future__ import annotations

from studylink.auth import create_access_token
from studylink.database import SessionLocal, utcnow
from studylink.models import (
    AuthorizedSchoolDomain,
    Company,
    CompanyOwner,
    Job,
    JobRequest,
    School,
    Student,
    User,
)
from studylink.services.mailer import EmailMessage, Mailer


class RecordingMailer(Mailer):
    def __init__(self) -> None:
        super().__init__(api_key="re_test", api_url="https://mail.test/emails", sender="StudyLink <noreply@studylink.test>")
        self.sent: list[EmailMessage] = []

    def send(self, message: EmailMessage) -> bool:
        self.sent.append(message)
        return True


def _save(entity):
    with SessionLocal() as db:
        db.add(entity)
        db.commit()
        db.refresh(entity)
        db.expunge(entity)
    return entity


def auth_headers(user_id: int) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def make_user(*, email: str, firstname: str = "Ada", lastname: str = "Lovelace", type: str | None = None) -> User:
    return _save(User(email=email, firstname=firstname, lastname=lastname, type=type))


def make_domain(*, domain: str = "ecole-test.fr") -> AuthorizedSchoolDomain:
    return _save(AuthorizedSchoolDomain(domain=domain))


def make_school(*, name: str = "Ecole Test", domain_id: int | None = None, is_active: bool = True) -> School:
    if domain_id is None:
        domain_id = make_domain().id
    return _save(School(name=name, domain_id=domain_id, is_active=is_active))


def make_student(
    *,
    email: str = "student@test.com",
    school_id: int | None = None,
    firstname: str = "Ada",
    lastname: str = "Lovelace",
    skills: list[str] | None = None,
    status: str = "ACTIVE",
    availability: bool = True,
) -> Student:
    user = make_user(email=email, firstname=firstname, lastname=lastname, type="student")
    if school_id is None:
        school_id = make_school().id
    return _save(
        Student(
            user_id=user.id,
            school_id=school_id,
            status=status,
            skills=skills if skills is not None else ["Python", "SQL"],
            description="Motivated student looking for an apprenticeship",
            previous_companies=["Company X"],
            availability=availability,
        )
    )


def make_company(*, name: str = "Entreprise Test", owner_emails: tuple[str, ...] = ()) -> Company:
    company = _save(Company(name=name))
    for email in owner_emails:
        owner = make_user(email=email, firstname="Manager", lastname="Owner", type="company_owner")
        _save(CompanyOwner(user_id=owner.id, company_id=company.id))
    return company


def make_job(
    *,
    company_id: int,
    name: str = "Full Stack Developer",
    skills: list[str] | None = None,
    type: str | None = None,
    deleted: bool = False,
) -> Job:
    return _save(
        Job(
            company_id=company_id,
            name=name,
            description="Apprenticeship on our web platform",
            skills=skills or [],
            type=type,
            deleted_at=utcnow() if deleted else None,
        )
    )


def make_job_request(*, student_id: int, job_id: int, status: str = "PENDING") -> JobRequest:
    return _save(JobRequest(student_id=student_id, job_id=job_id, status=status))
