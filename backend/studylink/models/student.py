from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from studylink.database import Base
from studylink.models.types import CommaSeparatedList


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    school_id = Column(Integer, ForeignKey("schools.id"), nullable=False, index=True)
    student_email = Column(String(320), unique=True)
    status = Column(String(50), nullable=False)
    skills = Column(CommaSeparatedList, nullable=False, default="")
    apprenticeship_rhythm = Column(String(255))
    description = Column(Text, nullable=False, default="")
    curriculum_vitae = Column(String(1000))
    previous_companies = Column(CommaSeparatedList, nullable=False, default="")
    availability = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="student")
    school = relationship("School", back_populates="students")
    job_requests = relationship("JobRequest", back_populates="student", cascade="all, delete-orphan")
    experiences = relationship("Experience", back_populates="student", cascade="all, delete-orphan")
