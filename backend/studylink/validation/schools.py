from __future__ import annotations

import re

from sqlalchemy.orm import Session

from studylink.repositories.schools import SchoolDomainRepository, SchoolOwnerRepository, SchoolRepository
from studylink.repositories.users import UserRepository
from studylink.validation.result import ValidationResult, is_blank, wants


DOMAIN_PATTERN = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9-]{1,61}[a-zA-Z0-9]\.[a-zA-Z]{2,}$")

INVALID_FORMAT = "INVALID_FORMAT"
DOMAIN_EXISTS = "DOMAIN_EXISTS"


def validate_school_data(db: Session, data: dict, is_update: bool = False) -> ValidationResult:
    result = ValidationResult()

    if not is_update and is_blank(data.get("name")):
        result.add("name", "Name is required")
    elif data.get("name") is not None and len(data["name"].strip()) < 2:
        result.add("name", "Name must be at least 2 characters")

    domain_id = data.get("domain_id")
    if not is_update and domain_id is None:
        result.add("domain_id", "Domain id is required")
    elif domain_id is not None and not SchoolDomainRepository(db).exists(domain_id):
        result.add("domain_id", "The specified domain does not exist")

    if not is_update:
        owner = data.get("owner") or {}
        email = owner.get("email")
        if is_blank(email):
            result.add("owner.email", "Owner email is required")
        elif "@" not in email:
            result.add("owner.email", "Owner email is not valid")

    return result


def validate_school_domain_data(db: Session, data: dict, domain_id: int | None = None) -> ValidationResult:
    result = ValidationResult()
    if "domain" not in data:
        return result

    domain = (data.get("domain") or "").strip().lower()
    if not DOMAIN_PATTERN.match(domain):
        result.add("domain", "Domain format is invalid", code=INVALID_FORMAT)
    elif SchoolDomainRepository(db).get_by_domain(domain, exclude_id=domain_id):
        result.add("domain", "This domain is already used by another school", code=DOMAIN_EXISTS)
    return result


def validate_school_owner_data(
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
            if SchoolOwnerRepository(db).get_by_user_id(user_id, exclude_id=owner_id):
                result.add("user_id", "This user already owns a school")

    if wants(data, "school_id", is_update):
        school_id = data.get("school_id")
        if school_id is None:
            result.add("school_id", "School id is required")
        elif SchoolRepository(db).get_active(school_id) is None:
            result.add("school_id", "The specified school does not exist")

    return result
