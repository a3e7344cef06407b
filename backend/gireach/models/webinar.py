"""SQLAlchemy models for webinars and attendee registrations."""

from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint

from gireach.database import Base
from gireach.utils.helpers import new_id, utcnow


class Webinar(Base):
    __tablename__ = "webinars"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    presenter_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    scheduled_date = Column(DateTime, nullable=False)
    duration = Column(Integer, default=60)  # minutes
    max_attendees = Column(Integer, default=100)
    current_attendees = Column(Integer, default=0)
    meeting_link = Column(Text)
    recording_url = Column(Text)
    is_public = Column(Boolean, default=True)
    status = Column(String(20), default="scheduled")  # scheduled/live/completed/cancelled
    created_at = Column(DateTime, default=utcnow)


class WebinarRegistration(Base):
    __tablename__ = "webinar_registrations"

    id = Column(String(36), primary_key=True, default=new_id)
    webinar_id = Column(String(36), ForeignKey("webinars.id"), nullable=False)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    registered_at = Column(DateTime, default=utcnow)
    attended = Column(Boolean, default=False)

    __table_args__ = (
        UniqueConstraint("webinar_id", "user_id", name="uq_webinar_registration_user"),
    )
