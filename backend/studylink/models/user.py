from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from studylink.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(320), unique=True, nullable=False, index=True)
    firstname = Column(String(120))
    lastname = Column(String(120))
    type = Column(String(30))
    profile_picture = Column(String(1000))
    profile_completed = Column(Boolean, default=False, nullable=False)
    email_verified_at = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime)

    student = relationship("Student", back_populates="user", uselist=False, cascade="all, delete-orphan")
    company_owner = relationship("CompanyOwner", back_populates="user", uselist=False, cascade="all, delete-orphan")
    school_owner = relationship("SchoolOwner", back_populates="user", uselist=False, cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.firstname, self.lastname) if part)
