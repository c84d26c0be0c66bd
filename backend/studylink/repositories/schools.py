from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import or_
from sqlalchemy.orm import Query

from studylink.models.school import AuthorizedSchoolDomain, School, SchoolOwner
from studylink.models.user import User
from studylink.repositories.base import Repository
from studylink.repositories.companies import OwnerFilters


SCHOOL_ORDER_COLUMNS = {
    "name": School.name,
    "created_at": School.created_at,
    "updated_at": School.updated_at,
}


@dataclass
class SchoolFilters:
    search: str | None = None
    is_active: bool | None = None
    domain_id: int | None = None
    order_by: str = "name"
    order: str = "asc"


class SchoolRepository(Repository[School]):
    model = School

    def get_active(self, school_id: int) -> School | None:
        return self.db.query(School).filter(School.id == school_id, School.deleted_at.is_(None)).first()

    def search(self, filters: SchoolFilters) -> Query:
        query = self.db.query(School).join(AuthorizedSchoolDomain).filter(School.deleted_at.is_(None))
        if filters.is_active is not None:
            query = query.filter(School.is_active == filters.is_active)
        if filters.domain_id is not None:
            query = query.filter(School.domain_id == filters.domain_id)
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(or_(School.name.ilike(pattern), AuthorizedSchoolDomain.domain.ilike(pattern)))
        column = SCHOOL_ORDER_COLUMNS.get(filters.order_by, School.name)
        ordering = column.desc() if filters.order == "desc" else column.asc()
        return query.order_by(ordering, School.id.asc())

    def list_for_domain(self, domain_id: int) -> list[School]:
        return (
            self.db.query(School)
            .filter(School.domain_id == domain_id, School.deleted_at.is_(None), School.is_active.is_(True))
            .order_by(School.name.asc())
            .all()
        )


class SchoolDomainRepository(Repository[AuthorizedSchoolDomain]):
    model = AuthorizedSchoolDomain

    def get_by_domain(self, domain: str, exclude_id: int | None = None) -> AuthorizedSchoolDomain | None:
        query = self.db.query(AuthorizedSchoolDomain).filter(AuthorizedSchoolDomain.domain == domain.strip().lower())
        if exclude_id is not None:
            query = query.filter(AuthorizedSchoolDomain.id != exclude_id)
        return query.first()

    def list_all(self) -> list[AuthorizedSchoolDomain]:
        return self.db.query(AuthorizedSchoolDomain).order_by(AuthorizedSchoolDomain.domain.asc()).all()


class SchoolOwnerRepository(Repository[SchoolOwner]):
    model = SchoolOwner

    def get_by_user_id(self, user_id: int, exclude_id: int | None = None) -> SchoolOwner | None:
        query = self.db.query(SchoolOwner).filter(SchoolOwner.user_id == user_id)
        if exclude_id is not None:
            query = query.filter(SchoolOwner.id != exclude_id)
        return query.first()

    def search(self, filters: OwnerFilters) -> Query:
        query = (
            self.db.query(SchoolOwner)
            .join(User, User.id == SchoolOwner.user_id)
            .join(School, School.id == SchoolOwner.school_id)
        )
        if filters.user_id is not None:
            query = query.filter(SchoolOwner.user_id == filters.user_id)
        if filters.school_id is not None:
            query = query.filter(SchoolOwner.school_id == filters.school_id)
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(
                    User.firstname.ilike(pattern),
                    User.lastname.ilike(pattern),
                    User.email.ilike(pattern),
                    School.name.ilike(pattern),
                )
            )
        return query.order_by(SchoolOwner.id.asc())
