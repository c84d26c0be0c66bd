from __future__ import annotations

import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from studylink.database import utcnow
from studylink.models import (
    AuthorizedSchoolDomain,
    Company,
    CompanyOwner,
    Job,
    JobRequest,
    JobRequestStatus,
    School,
    SchoolOwner,
    Student,
    User,
)


logger = logging.getLogger(__name__)

# columns added after the first deployed schema
RUNTIME_COLUMNS = (
    ("users", "profile_completed", "profile_completed BOOLEAN NOT NULL DEFAULT FALSE"),
    ("users", "deleted_at", "deleted_at TIMESTAMP"),
    ("students", "student_email", "student_email VARCHAR(320)"),
    ("jobs", "deleted_at", "deleted_at TIMESTAMP"),
    ("job_requests", "subject", "subject VARCHAR(255)"),
    ("job_requests", "message", "message TEXT"),
    ("job_requests", "deleted_at", "deleted_at TIMESTAMP"),
)


def _column_exists(conn, table_name: str, column_name: str) -> bool:
    return any(column["name"] == column_name for column in inspect(conn).get_columns(table_name))


def _add_column_if_missing(conn, table_name: str, column_name: str, column_sql: str) -> None:
    if _column_exists(conn, table_name, column_name):
        return
    conn.execute(text(f"ALTER TABLE {table_name} ADD COLUMN {column_sql}"))
    logger.info("Added column %s.%s", table_name, column_name)


def run_runtime_migrations(engine: Engine) -> None:
    with engine.begin() as conn:
        for table_name, column_name, column_sql in RUNTIME_COLUMNS:
            _add_column_if_missing(conn, table_name, column_name, column_sql)


def seed_demo_data(db: Session) -> bool:
    """Loads one school, company, owner of each kind, student, job and request.

    Does nothing when any user already exists. Returns whether data was written.
    """
    if db.query(User.id).first() is not None:
        logger.info("Database already has users, skipping demo seed")
        return False

    now = utcnow()
    domain = AuthorizedSchoolDomain(domain="ecole-test.fr")
    school = School(name="École Test", domain=domain, is_active=True)
    company = Company(name="Entreprise Test")

    school_owner = User(
        email="school-owner@ecole-test.fr",
        firstname="Directeur",
        lastname="École",
        type="school_owner",
        email_verified_at=now,
    )
    company_owner = User(
        email="company-owner@entreprise-test.fr",
        firstname="Manager",
        lastname="Entreprise",
        type="company_owner",
        email_verified_at=now,
    )
    student_user = User(
        email="student@test.com",
        firstname="Étudiant",
        lastname="Test",
        type="student",
        profile_completed=True,
        email_verified_at=now,
    )
    student = Student(
        user=student_user,
        school=school,
        student_email="student@ecole-test.fr",
        status="ACTIVE",
        skills=["JavaScript", "React", "Node.js"],
        apprenticeship_rhythm="3 semaines entreprise / 1 semaine école",
        description="Étudiant motivé en recherche d'alternance",
        previous_companies=["Stage chez Company X"],
        availability=True,
    )
    job = Job(
        company=company,
        name="Développeur Full Stack",
        description="Nous recherchons un développeur full stack pour un contrat d'alternance",
        skills=[],
    )

    db.add_all(
        [
            domain,
            school,
            company,
            SchoolOwner(user=school_owner, school=school),
            CompanyOwner(user=company_owner, company=company),
            student,
            job,
            JobRequest(student=student, job=job, status=JobRequestStatus.PENDING.value),
        ]
    )
    db.commit()
    logger.info("Demo data seeded")
    return True
