from __future__ import annotations

from sqlalchemy.orm import Session

from studylink.models.job_request import JobRequestStatus
from studylink.repositories.jobs import JobRepository
from studylink.repositories.students import StudentRepository
from studylink.validation.result import ValidationResult, is_blank


STATUS_VALUES = tuple(status.value for status in JobRequestStatus)
STATUS_MESSAGE = "Status must be one of " + ", ".join(STATUS_VALUES)


def validate_job_request_data(db: Session, data: dict) -> ValidationResult:
    result = ValidationResult()

    student_id = data.get("student_id")
    if student_id is None:
        result.add("student_id", "Student id is required")
    elif not StudentRepository(db).exists(student_id):
        result.add("student_id", "The specified student does not exist")

    job_id = data.get("job_id")
    if job_id is None:
        result.add("job_id", "Job id is required")
    elif JobRepository(db).get_active(job_id) is None:
        result.add("job_id", "The specified job does not exist")

    status = data.get("status")
    if is_blank(status):
        result.add("status", "Status is required")
    elif status not in STATUS_VALUES:
        result.add("status", STATUS_MESSAGE)

    return result


def validate_job_request_update_data(data: dict) -> ValidationResult:
    result = ValidationResult()
    if "status" in data and data["status"] not in STATUS_VALUES:
        result.add("status", STATUS_MESSAGE)
    return result
