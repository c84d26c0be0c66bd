from __future__ import annotations

import enum

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import relationship

from studylink.database import Base


class JobRequestStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class JobRequest(Base):
    __tablename__ = "job_requests"
    # (student_id, job_id) uniqueness only holds among non-deleted rows and is checked in the service
    __table_args__ = (Index("idx_job_requests_student_job", "student_id", "job_id"),)

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(String(20), default=JobRequestStatus.PENDING.value, nullable=False)
    subject = Column(String(255))
    message = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime)

    student = relationship("Student", back_populates="job_requests")
    job = relationship("Job", back_populates="job_requests")
