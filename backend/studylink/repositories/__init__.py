from studylink.repositories.base import Page, paginate
from studylink.repositories.companies import CompanyOwnerRepository, CompanyRepository, OwnerFilters
from studylink.repositories.experiences import ExperienceFilters, ExperienceRepository
from studylink.repositories.job_requests import JobRequestRepository
from studylink.repositories.jobs import JobFilters, JobRepository
from studylink.repositories.schools import (
    SchoolDomainRepository,
    SchoolFilters,
    SchoolOwnerRepository,
    SchoolRepository,
)
from studylink.repositories.students import StudentFilters, StudentRepository
from studylink.repositories.users import UserRepository

__all__ = [
    "CompanyOwnerRepository",
    "CompanyRepository",
    "ExperienceFilters",
    "ExperienceRepository",
    "JobFilters",
    "JobRepository",
    "JobRequestRepository",
    "OwnerFilters",
    "Page",
    "SchoolDomainRepository",
    "SchoolFilters",
    "SchoolOwnerRepository",
    "SchoolRepository",
    "StudentFilters",
    "StudentRepository",
    "UserRepository",
    "paginate",
]
