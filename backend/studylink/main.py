from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from studylink.api import (
    auth,
    companies,
    company_account,
    company_owners,
    experiences,
    job_requests,
    jobs,
    school_domains,
    school_owners,
    schools,
    student_job_requests,
    students,
    users,
)
from studylink.bootstrap import run_runtime_migrations, seed_demo_data
from studylink.config import settings
from studylink.database import Base, SessionLocal, engine
from studylink.errors import ApiError
from studylink.schemas.common import ErrorOut
from studylink import models  # noqa: F401


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        details.append({"field": ".".join(location) or "body", "message": error.get("msg", "Invalid value")})
    return JSONResponse(status_code=400, content={"error": "Invalid data", "details": details})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    payload = ErrorOut(error="An unexpected error occurred")
    return JSONResponse(status_code=500, content=payload.model_dump(exclude_none=True))


@app.on_event("startup")
def on_startup() -> None:
    settings.ensure_directories()
    Base.metadata.create_all(bind=engine)
    run_runtime_migrations(engine)
    if settings.seed_demo_data:
        with SessionLocal() as db:
            seed_demo_data(db)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
app.include_router(users.router, prefix="/api/users", tags=["users"])
# before students so /api/students/job-requests is not read as a student id
app.include_router(student_job_requests.router, prefix="/api/students/job-requests", tags=["job_requests"])
app.include_router(students.router, prefix="/api/students", tags=["students"])
app.include_router(experiences.router, prefix="/api/students/{student_id}/experiences", tags=["experiences"])
app.include_router(schools.router, prefix="/api/schools", tags=["schools"])
app.include_router(school_domains.router, prefix="/api/school-domains", tags=["school_domains"])
app.include_router(school_owners.router, prefix="/api/school-owners", tags=["school_owners"])
app.include_router(companies.router, prefix="/api/companies", tags=["companies"])
app.include_router(company_account.router, prefix="/api/company", tags=["companies"])
app.include_router(company_owners.router, prefix="/api/company-owners", tags=["company_owners"])
app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"])
app.include_router(job_requests.router, prefix="/api/job-requests", tags=["job_requests"])
