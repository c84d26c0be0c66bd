from __future__ import annotations

from dataclasses import dataclass, field

from sqlalchemy import or_
from sqlalchemy.orm import Query

from studylink.models.student import Student
from studylink.models.types import list_contains
from studylink.models.user import User
from studylink.repositories.base import Repository


@dataclass
class StudentFilters:
    school_id: int | None = None
    status: str | None = None
    search: str | None = None
    skills: list[str] = field(default_factory=list)
    availability: bool | None = None


class StudentRepository(Repository[Student]):
    model = Student

    def get_by_user_id(self, user_id: int) -> Student | None:
        return self.db.query(Student).filter(Student.user_id == user_id).first()

    def get_by_student_email(self, student_email: str, exclude_id: int | None = None) -> Student | None:
        query = self.db.query(Student).filter(Student.student_email == student_email.strip().lower())
        if exclude_id is not None:
            query = query.filter(Student.id != exclude_id)
        return query.first()

    def search(self, filters: StudentFilters) -> Query:
        query = self.db.query(Student).join(User, User.id == Student.user_id)
        if filters.school_id is not None:
            query = query.filter(Student.school_id == filters.school_id)
        if filters.status:
            query = query.filter(Student.status == filters.status)
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(
                    User.firstname.ilike(pattern),
                    User.lastname.ilike(pattern),
                    User.email.ilike(pattern),
                    Student.skills.ilike(pattern),
                )
            )
        for skill in filters.skills:
            query = query.filter(list_contains(Student.skills, skill))
        if filters.availability is not None:
            query = query.filter(Student.availability == filters.availability)
        return query.order_by(Student.created_at.desc(), Student.id.desc())
