from studylink.schemas.auth import AuthenticateRequest, AuthResponse, CompanySignupRequest, SignupRequest, VerifyRequest
from studylink.schemas.common import ErrorOut, FieldErrorOut, PageOut, SuccessOut
from studylink.schemas.company import CompanyCreate, CompanyOut, CompanyUpdate
from studylink.schemas.experience import ExperienceCreate, ExperienceOut, ExperienceUpdate
from studylink.schemas.job import JobCreate, JobOut, JobUpdate
from studylink.schemas.job_request import (
    JobApplicationCreate,
    JobRequestCreate,
    JobRequestDetailOut,
    JobRequestOut,
    JobRequestStatusUpdate,
)
from studylink.schemas.owner import (
    CompanyOwnerCreate,
    CompanyOwnerOut,
    CompanyOwnerUpdate,
    SchoolOwnerCreate,
    SchoolOwnerOut,
    SchoolOwnerUpdate,
)
from studylink.schemas.school import SchoolCreate, SchoolDomainCreate, SchoolOut, SchoolUpdate
from studylink.schemas.student import StudentCreate, StudentOut, StudentProfileCreate, StudentUpdate
from studylink.schemas.user import CurrentUserOut, UserCreate, UserOut, UserUpdate

__all__ = [
    "AuthResponse",
    "AuthenticateRequest",
    "CompanyCreate",
    "CompanyOut",
    "CompanyOwnerCreate",
    "CompanyOwnerOut",
    "CompanyOwnerUpdate",
    "CompanySignupRequest",
    "CompanyUpdate",
    "CurrentUserOut",
    "ErrorOut",
    "ExperienceCreate",
    "ExperienceOut",
    "ExperienceUpdate",
    "FieldErrorOut",
    "JobApplicationCreate",
    "JobCreate",
    "JobOut",
    "JobRequestCreate",
    "JobRequestDetailOut",
    "JobRequestOut",
    "JobRequestStatusUpdate",
    "JobUpdate",
    "PageOut",
    "SchoolCreate",
    "SchoolDomainCreate",
    "SchoolOut",
    "SchoolOwnerCreate",
    "SchoolOwnerOut",
    "SchoolOwnerUpdate",
    "SchoolUpdate",
    "SignupRequest",
    "StudentCreate",
    "StudentOut",
    "StudentProfileCreate",
    "StudentUpdate",
    "SuccessOut",
    "UserCreate",
    "UserOut",
    "UserUpdate",
    "VerifyRequest",
]
