from studylink.models.company import Company, CompanyOwner
from studylink.models.experience import Experience, ExperienceType
from studylink.models.job import Job
from studylink.models.job_request import JobRequest, JobRequestStatus
from studylink.models.school import AuthorizedSchoolDomain, School, SchoolOwner
from studylink.models.student import Student
from studylink.models.user import User

__all__ = [
    "AuthorizedSchoolDomain",
    "Company",
    "CompanyOwner",
    "Experience",
    "ExperienceType",
    "Job",
    "JobRequest",
    "JobRequestStatus",
    "School",
    "SchoolOwner",
    "Student",
    "User",
]
