from __future__ import annotations

from sqlalchemy.orm import Session

from studylink.repositories.companies import CompanyRepository
from studylink.validation.result import ValidationResult, is_blank


def validate_job_data(db: Session, data: dict, is_update: bool = False) -> ValidationResult:
    result = ValidationResult()

    company_id = data.get("company_id")
    if not is_update and company_id is None:
        result.add("company_id", "Company id is required")
    elif company_id is not None and not CompanyRepository(db).exists(company_id):
        result.add("company_id", "The specified company does not exist")

    if not is_update and is_blank(data.get("name")):
        result.add("name", "Job title is required")
    elif "name" in data and is_blank(data.get("name")):
        result.add("name", "Job title cannot be empty")

    if not is_update and is_blank(data.get("description")):
        result.add("description", "Job description is required")

    return result
