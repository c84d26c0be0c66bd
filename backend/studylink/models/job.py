from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import relationship

from studylink.database import Base
from studylink.models.types import CommaSeparatedList


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        Index("idx_jobs_company_deleted", "company_id", "deleted_at"),
        Index("idx_jobs_created_at", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    featured_image = Column(String(1000))
    skills = Column(CommaSeparatedList, nullable=False, default="")
    type = Column(String(50))
    availability = Column(String(255))
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime)

    company = relationship("Company", back_populates="jobs")
    job_requests = relationship("JobRequest", back_populates="job", cascade="all, delete-orphan")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
