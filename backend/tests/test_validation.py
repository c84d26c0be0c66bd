from __future__ import annotations

from datetime import datetime

from factories import make_company, make_job, make_school, make_student, make_user
from studylink.models import Student
from studylink.validation import (
    validate_company_data,
    validate_company_owner_data,
    validate_experience_data,
    validate_job_data,
    validate_job_request_data,
    validate_job_request_update_data,
    validate_school_domain_data,
    validate_school_owner_data,
    validate_student_data,
    validate_user_data,
)


def _fields(result) -> list[str]:
    return [error.field for error in result.errors]


def test_user_create_and_update_modes(db):
    make_user(email="ada@test.com")

    result = validate_user_data(db, {"email": "ADA@test.com", "firstname": "A"})
    assert _fields(result) == ["email", "firstname", "lastname"]

    assert validate_user_data(db, {"firstname": "Grace"}, is_update=True).is_valid
    assert _fields(validate_user_data(db, {"email": "no-at-sign"}, is_update=True)) == ["email"]


def test_user_update_excludes_itself(db):
    ada = make_user(email="ada@test.com")
    assert validate_user_data(db, {"email": "ada@test.com"}, is_update=True, user_id=ada.id).is_valid


def test_student_rules(db):
    school = make_school()
    user = make_user(email="ada@test.com")

    result = validate_student_data(db, {"user_id": 999, "school_id": 999})
    assert _fields(result)[:2] == ["user_id", "school_id"]

    data = {
        "user_id": user.id,
        "school_id": school.id,
        "status": "ACTIVE",
        "skills": ["Python"],
        "description": "Looking for an apprenticeship",
        "previous_companies": [],
        "availability": False,
    }
    assert _fields(validate_student_data(db, data)) == ["previous_companies"]
    assert validate_student_data(db, data, optional=("previous_companies",)).is_valid

    result = validate_student_data(db, {"description": "too short"}, is_update=True)
    assert result.errors[0].message == "Description must be at least 10 characters"


def test_student_email_unique_excluding_self(db):
    student = make_student(email="ada@test.com")
    db.get(Student, student.id).student_email = "ada@ecole-test.fr"
    db.commit()

    data = {"student_email": "ADA@ecole-test.fr"}
    assert _fields(validate_student_data(db, data, is_update=True)) == ["student_email"]
    assert validate_student_data(db, data, is_update=True, student_id=student.id).is_valid


def test_school_domain_codes(db):
    result = validate_school_domain_data(db, {"domain": "-bad-.fr"})
    assert result.code == "INVALID_FORMAT"

    school = make_school()
    result = validate_school_domain_data(db, {"domain": "ECOLE-TEST.FR"})
    assert result.code == "DOMAIN_EXISTS"
    assert validate_school_domain_data(db, {"domain": "ecole-test.fr"}, domain_id=school.domain_id).is_valid
    assert validate_school_domain_data(db, {}).is_valid


def test_company_rules():
    assert _fields(validate_company_data({})) == ["name"]
    assert _fields(validate_company_data({}, is_update=True)) == ["body"]
    assert _fields(validate_company_data({"name": " " + "x" * 100 + " "})) == []
    assert _fields(validate_company_data({"name": "x" * 101})) == ["name"]
    assert _fields(validate_company_data({"name": "Acme", "logo": "/static/logo.png"})) == ["logo"]
    assert validate_company_data({"name": "Acme", "logo": ""}).is_valid


def test_company_owner_rules(db):
    company = make_company(owner_emails=("boss@acme.test",))
    user = make_user(email="new@acme.test")

    assert validate_company_owner_data(db, {"user_id": user.id, "company_id": company.id}).is_valid
    assert _fields(validate_company_owner_data(db, {"user_id": 999, "company_id": 999})) == [
        "user_id",
        "company_id",
    ]
    assert _fields(validate_company_owner_data(db, {"company_id": company.id}, is_update=True)) == []


def test_job_rules(db):
    company = make_company()

    assert _fields(validate_job_data(db, {})) == ["company_id", "name", "description"]
    assert validate_job_data(db, {"company_id": company.id, "name": "Dev", "description": "Build things"}).is_valid
    assert validate_job_data(db, {"description": "Only this"}, is_update=True).is_valid


def test_job_request_rules(db):
    company = make_company()
    job = make_job(company_id=company.id)
    deleted = make_job(company_id=company.id, deleted=True)
    student = make_student()

    assert validate_job_request_data(db, {"student_id": student.id, "job_id": job.id, "status": "PENDING"}).is_valid
    result = validate_job_request_data(db, {"student_id": student.id, "job_id": deleted.id, "status": "DONE"})
    assert _fields(result) == ["job_id", "status"]
    assert result.errors[1].message == "Status must be one of PENDING, ACCEPTED, REJECTED"

    assert validate_job_request_update_data({}).is_valid
    assert _fields(validate_job_request_update_data({"status": "pending"})) == ["status"]


def test_school_owner_rules(db):
    school = make_school()
    user = make_user(email="director@ecole-test.fr")

    assert validate_school_owner_data(db, {"user_id": user.id, "school_id": school.id}).is_valid
    assert _fields(validate_school_owner_data(db, {"user_id": 999, "school_id": 999})) == ["user_id", "school_id"]
    assert validate_school_owner_data(db, {"school_id": school.id}, is_update=True).is_valid


def test_experience_rules():
    data = {"position": "Analyst", "company": "Acme", "type": "CDD"}
    assert validate_experience_data(data).is_valid
    assert _fields(validate_experience_data({"type": "Job"})) == ["position", "company", "type"]
    assert _fields(validate_experience_data({}, is_update=True)) == ["body"]
    assert validate_experience_data({"company": "Globex"}, is_update=True).is_valid

    dates = {**data, "start_date": datetime(2024, 1, 1), "end_date": datetime(2023, 1, 1)}
    assert _fields(validate_experience_data(dates)) == ["end_date"]
