from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import or_
from sqlalchemy.orm import Query

from studylink.models.company import Company, CompanyOwner
from studylink.models.user import User
from studylink.repositories.base import Repository


@dataclass
class OwnerFilters:
    user_id: int | None = None
    company_id: int | None = None
    school_id: int | None = None
    search: str | None = None


class CompanyRepository(Repository[Company]):
    model = Company

    def list_all(self) -> list[Company]:
        return self.db.query(Company).order_by(Company.name.asc(), Company.id.asc()).all()

    def owner_users(self, company_id: int) -> list[User]:
        return (
            self.db.query(User)
            .join(CompanyOwner, CompanyOwner.user_id == User.id)
            .filter(CompanyOwner.company_id == company_id)
            .order_by(CompanyOwner.id.asc())
            .all()
        )


class CompanyOwnerRepository(Repository[CompanyOwner]):
    model = CompanyOwner

    def get_by_user_id(self, user_id: int, exclude_id: int | None = None) -> CompanyOwner | None:
        query = self.db.query(CompanyOwner).filter(CompanyOwner.user_id == user_id)
        if exclude_id is not None:
            query = query.filter(CompanyOwner.id != exclude_id)
        return query.first()

    def search(self, filters: OwnerFilters) -> Query:
        query = (
            self.db.query(CompanyOwner)
            .join(User, User.id == CompanyOwner.user_id)
            .join(Company, Company.id == CompanyOwner.company_id)
        )
        if filters.user_id is not None:
            query = query.filter(CompanyOwner.user_id == filters.user_id)
        if filters.company_id is not None:
            query = query.filter(CompanyOwner.company_id == filters.company_id)
        if filters.search:
            pattern = f"%{filters.search.strip()}%"
            query = query.filter(
                or_(
                    User.firstname.ilike(pattern),
                    User.lastname.ilike(pattern),
                    User.email.ilike(pattern),
                    Company.name.ilike(pattern),
                )
            )
        return query.order_by(CompanyOwner.id.asc())
