from __future__ import annotations

from urllib.parse import urlparse

from sqlalchemy.orm import Session

from studylink.repositories.companies import CompanyOwnerRepository, CompanyRepository
from studylink.repositories.users import UserRepository
from studylink.validation.result import ValidationResult, is_blank, wants


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100


def _is_absolute_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


def validate_company_data(data: dict, is_update: bool = False) -> ValidationResult:
    result = ValidationResult()

    if is_update and not data:
        result.add("body", "No data provided for update")
        return result

    name = data.get("name")
    if not is_update and is_blank(name):
        result.add("name", "Company name is required")
    elif name is not None:
        length = len(name.strip())
        if length < NAME_MIN_LENGTH:
            result.add("name", f"Company name must be at least {NAME_MIN_LENGTH} characters")
        elif length > NAME_MAX_LENGTH:
            result.add("name", f"Company name cannot exceed {NAME_MAX_LENGTH} characters")

    logo = data.get("logo")
    if logo and not _is_absolute_url(logo):
        result.add("logo", "Logo URL is not valid")

    return result


def validate_company_owner_data(
    db: Session,
    data: dict,
    is_update: bool = False,
    owner_id: int | None = None,
) -> ValidationResult:
    result = ValidationResult()

    if wants(data, "user_id", is_update):
        user_id = data.get("user_id")
        if user_id is None:
            result.add("user_id", "User id is required")
        else:
            if not UserRepository(db).exists(user_id):
                result.add("user_id", "The specified user does not exist")
            if CompanyOwnerRepository(db).get_by_user_id(user_id, exclude_id=owner_id):
                result.add("user_id", "This user already owns a company")

    if wants(data, "company_id", is_update):
        company_id = data.get("company_id")
        if company_id is None:
            result.add("company_id", "Company id is required")
        elif not CompanyRepository(db).exists(company_id):
            result.add("company_id", "The specified company does not exist")

    return result
