from __future__ import annotations

from sqlalchemy import func

from studylink.models.user import User
from studylink.repositories.base import Repository


class UserRepository(Repository[User]):
    model = User

    def get_active(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id, User.deleted_at.is_(None)).first()

    def get_by_email(self, email: str, exclude_id: int | None = None) -> User | None:
        query = self.db.query(User).filter(func.lower(User.email) == email.strip().lower())
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        return query.first()

    def list_active(self) -> list[User]:
        return self.db.query(User).filter(User.deleted_at.is_(None)).order_by(User.created_at.desc(), User.id.desc()).all()
