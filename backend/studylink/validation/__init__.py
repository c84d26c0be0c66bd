from studylink.validation.companies import validate_company_data, validate_company_owner_data
from studylink.validation.experiences import validate_experience_data
from studylink.validation.job_requests import validate_job_request_data, validate_job_request_update_data
from studylink.validation.jobs import validate_job_data
from studylink.validation.result import ValidationResult
from studylink.validation.schools import validate_school_data, validate_school_domain_data, validate_school_owner_data
from studylink.validation.students import validate_student_data
from studylink.validation.users import validate_user_data

__all__ = [
    "ValidationResult",
    "validate_company_data",
    "validate_company_owner_data",
    "validate_experience_data",
    "validate_job_data",
    "validate_job_request_data",
    "validate_job_request_update_data",
    "validate_school_data",
    "validate_school_domain_data",
    "validate_school_owner_data",
    "validate_student_data",
    "validate_user_data",
]
