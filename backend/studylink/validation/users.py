from __future__ import annotations

from sqlalchemy.orm import Session

from studylink.repositories.users import UserRepository
from studylink.validation.result import ValidationResult, is_blank, wants


def validate_user_data(db: Session, data: dict, is_update: bool = False, user_id: int | None = None) -> ValidationResult:
    result = ValidationResult()
    users = UserRepository(db)

    if wants(data, "email", is_update):
        email = data.get("email")
        if is_blank(email):
            result.add("email", "Email is required")
        elif "@" not in email:
            result.add("email", "Email address is not valid")
        elif users.get_by_email(email, exclude_id=user_id if is_update else None):
            result.add("email", "A user with this email already exists")

    for name, label in (("firstname", "First name"), ("lastname", "Last name")):
        if not wants(data, name, is_update):
            continue
        value = data.get(name)
        if is_blank(value):
            result.add(name, f"{label} is required")
        elif len(value.strip()) < 2:
            result.add(name, f"{label} must be at least 2 characters")

    return result
