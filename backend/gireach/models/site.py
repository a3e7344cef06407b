"""SQLAlchemy models for editable site data: settings, page content and media."""

from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, ForeignKey, JSON, Index

from gireach.database import Base
from gireach.utils.helpers import new_id, utcnow


class WebsiteSettings(Base):
    __tablename__ = "website_settings"

    id = Column(String(36), primary_key=True, default=new_id)
    setting_key = Column(String(100), unique=True, nullable=False)  # logo/theme/navigation/footer
    setting_value = Column(JSON, nullable=False)
    is_active = Column(Boolean, default=True)
    updated_by_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class PageContent(Base):
    __tablename__ = "page_contents"

    id = Column(String(36), primary_key=True, default=new_id)
    page_id = Column(String(100), unique=True, nullable=False)  # home/about/programs/...
    page_name = Column(Text, nullable=False)
    sections = Column(JSON, nullable=False)  # ordered list of sections
    is_published = Column(Boolean, default=True)
    updated_by_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class MediaItem(Base):
    __tablename__ = "media_library"

    id = Column(String(36), primary_key=True, default=new_id)
    file_name = Column(Text, nullable=False)
    original_name = Column(Text, nullable=False)
    file_type = Column(String(20), nullable=False)  # image/video/document
    mime_type = Column(String(100), nullable=False)
    file_size = Column(Integer, nullable=False)
    file_url = Column(Text, nullable=False)
    alt_text = Column(Text)
    description = Column(Text)
    uploaded_by_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime, default=utcnow)

    __table_args__ = (
        Index("idx_media_library_type", "file_type"),
    )
