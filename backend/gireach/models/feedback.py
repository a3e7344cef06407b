"""SQLAlchemy models for feedback forms and their submitted responses."""

from sqlalchemy import Column, String, Text, Boolean, DateTime, ForeignKey, JSON, Index

from gireach.database import Base
from gireach.utils.helpers import new_id, utcnow


class FeedbackForm(Base):
    __tablename__ = "feedback_forms"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(Text, nullable=False)
    description = Column(Text)
    questions = Column(JSON, nullable=False)  # ordered list of question objects
    is_active = Column(Boolean, default=True)
    created_by_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class FeedbackResponse(Base):
    __tablename__ = "feedback_responses"

    id = Column(String(36), primary_key=True, default=new_id)
    form_id = Column(String(36), ForeignKey("feedback_forms.id", ondelete="CASCADE"), nullable=False)
    responses = Column(JSON, nullable=False)  # question id -> answer
    submitted_at = Column(DateTime, default=utcnow)

    __table_args__ = (
        Index("idx_feedback_response_form", "form_id", "submitted_at"),
    )
