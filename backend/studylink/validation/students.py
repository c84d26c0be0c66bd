from __future__ import annotations

from sqlalchemy.orm import Session

from studylink.repositories.schools import SchoolRepository
from studylink.repositories.students import StudentRepository
from studylink.repositories.users import UserRepository
from studylink.validation.result import ValidationResult, is_blank, wants


MIN_DESCRIPTION_LENGTH = 10


def validate_student_data(
    db: Session,
    data: dict,
    is_update: bool = False,
    student_id: int | None = None,
    optional: tuple[str, ...] = (),
) -> ValidationResult:
    """`optional` names fields a create may leave out."""
    result = ValidationResult()

    if not is_update:
        user_id = data.get("user_id")
        if user_id is None:
            result.add("user_id", "User id is required")
        elif UserRepository(db).get_active(user_id) is None:
            result.add("user_id", "The specified user does not exist")
        elif StudentRepository(db).get_by_user_id(user_id) is not None:
            result.add("user_id", "This user already has a student profile")

        school_id = data.get("school_id")
        if school_id is None:
            result.add("school_id", "School id is required")
        elif SchoolRepository(db).get_active(school_id) is None:
            result.add("school_id", "The specified school does not exist")

    if wants(data, "status", is_update) and is_blank(data.get("status")):
        result.add("status", "Status is required")

    if wants(data, "skills", is_update) and is_blank(data.get("skills")):
        result.add("skills", "Skills are required")

    if wants(data, "description", is_update):
        description = data.get("description")
        if is_blank(description):
            result.add("description", "Description is required")
        elif len(description.strip()) < MIN_DESCRIPTION_LENGTH:
            result.add("description", f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters")

    previous_companies = data.get("previous_companies")
    if wants(data, "previous_companies", is_update) and "previous_companies" not in optional and is_blank(previous_companies):
        result.add("previous_companies", "Previous companies are required")

    if wants(data, "availability", is_update) and data.get("availability") is None:
        result.add("availability", "Availability is required")

    student_email = data.get("student_email")
    if student_email:
        if "@" not in student_email:
            result.add("student_email", "Student email is not valid")
        elif StudentRepository(db).get_by_student_email(student_email, exclude_id=student_id):
            result.add("student_email", "This student email is already used")

    return result
