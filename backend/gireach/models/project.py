"""SQLAlchemy models for group research projects and their participants."""

from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, Index

from gireach.database import Base
from gireach.utils.helpers import new_id, utcnow


class GroupProject(Base):
    __tablename__ = "group_projects"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    project_type = Column(String(40), nullable=False)  # meta_analysis/systematic_review/original_research
    status = Column(String(20), default="recruiting")  # recruiting/active/analysis/writing/completed
    max_participants = Column(Integer, default=15)
    current_participants = Column(Integer, default=0)
    lead_researcher_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    start_date = Column(DateTime)
    expected_completion_date = Column(DateTime)
    is_public = Column(Boolean, default=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class GroupProjectParticipant(Base):
    __tablename__ = "group_project_participants"

    id = Column(String(36), primary_key=True, default=new_id)
    project_id = Column(String(36), ForeignKey("group_projects.id"), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    role = Column(String(20), default="contributor")  # lead/co_lead/contributor/reviewer
    contribution_type = Column(Text)  # data_collection/analysis/writing/review
    joined_at = Column(DateTime, default=utcnow)
    is_active = Column(Boolean, default=True)

    __table_args__ = (
        Index("idx_group_project_participant_project", "project_id", "user_id"),
    )
