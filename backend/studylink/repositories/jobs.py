from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy import or_
from sqlalchemy.orm import Query

from studylink.models.company import Company
from studylink.models.job import Job
from studylink.models.types import list_contains
from studylink.repositories.base import Repository


@dataclass
class JobFilters:
    company_id: int | None = None
    type: str | None = None
    availability: str | None = None
    skills: list[str] = field(default_factory=list)
    search: str | None = None


class JobRepository(Repository[Job]):
    model = Job

    def get_active(self, job_id: int) -> Job | None:
        return self.db.query(Job).filter(Job.id == job_id, Job.deleted_at.is_(None)).first()

    def search(self, filters: JobFilters) -> Query:
        query = self.db.query(Job).join(Company, Company.id == Job.company_id).filter(Job.deleted_at.is_(None))
        if filters.company_id is not None:
            query = query.filter(Job.company_id == filters.company_id)
        if filters.type:
            query = query.filter(Job.type == filters.type)
        if filters.availability:
            query = query.filter(Job.availability == filters.availability)
        for skill in filters.skills:
            query = query.filter(list_contains(Job.skills, skill))
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(Job.name.ilike(pattern), Job.description.ilike(pattern), Company.name.ilike(pattern))
            )
        return query.order_by(Job.created_at.desc(), Job.id.desc())

    def list_for_company(self, company_id: int) -> list[Job]:
        return self.search(JobFilters(company_id=company_id)).all()
