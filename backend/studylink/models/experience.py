from __future__ import annotations

import enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from studylink.database import Base


class ExperienceType(str, enum.Enum):
    INTERNSHIP = "Stage"
    APPRENTICESHIP = "Alternance"
    PERMANENT = "CDI"
    FIXED_TERM = "CDD"
    OTHER = "Autre"


class Experience(Base):
    __tablename__ = "experiences"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False)
    start_date = Column(DateTime)
    end_date = Column(DateTime)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    student = relationship("Student", back_populates="experiences")
