from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from studylink.database import Base


class AuthorizedSchoolDomain(Base):
    __tablename__ = "authorized_school_domains"

    id = Column(Integer, primary_key=True, index=True)
    domain = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, server_default=func.now())

    schools = relationship("School", back_populates="domain")


class School(Base):
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    logo = Column(String(1000))
    domain_id = Column(Integer, ForeignKey("authorized_school_domains.id"), nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime)

    domain = relationship("AuthorizedSchoolDomain", back_populates="schools")
    owners = relationship("SchoolOwner", back_populates="school", cascade="all, delete-orphan")
    students = relationship("Student", back_populates="school")


class SchoolOwner(Base):
    __tablename__ = "school_owners"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    school_id = Column(Integer, ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True)

    user = relationship("User", back_populates="school_owner")
    school = relationship("School", back_populates="owners")
