from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Query

from studylink.models.experience import Experience
from studylink.repositories.base import Repository


EXPERIENCE_ORDER_COLUMNS = {
    "start_date": Experience.start_date,
    "end_date": Experience.end_date,
    "position": Experience.position,
    "company": Experience.company,
    "created_at": Experience.created_at,
}


@dataclass
class ExperienceFilters:
    type: str | None = None
    company: str | None = None
    search: str | None = None
    start_date_after: datetime | None = None
    start_date_before: datetime | None = None
    order_by: str = "start_date"
    order: str = "desc"


class ExperienceRepository(Repository[Experience]):
    model = Experience

    def get_for_student(self, student_id: int, experience_id: int) -> Experience | None:
        return (
            self.db.query(Experience)
            .filter(Experience.id == experience_id, Experience.student_id == student_id)
            .first()
        )

    def search(self, student_id: int, filters: ExperienceFilters) -> Query:
        query = self.db.query(Experience).filter(Experience.student_id == student_id)
        if filters.type:
            query = query.filter(Experience.type == filters.type)
        if filters.company:
            query = query.filter(Experience.company.ilike(f"%{filters.company.strip()}%"))
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(or_(Experience.position.ilike(pattern), Experience.company.ilike(pattern)))
        if filters.start_date_after is not None:
            query = query.filter(Experience.start_date >= filters.start_date_after)
        if filters.start_date_before is not None:
            query = query.filter(Experience.start_date <= filters.start_date_before)
        column = EXPERIENCE_ORDER_COLUMNS.get(filters.order_by, Experience.start_date)
        ordering = column.asc() if filters.order == "asc" else column.desc()
        return query.order_by(ordering, Experience.id.desc())
