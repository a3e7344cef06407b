"""SQLAlchemy model for site users (admins, mentors, mentees)."""

from sqlalchemy import Column, String, Boolean, DateTime

from gireach.database import Base
from gireach.utils.helpers import new_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(100), nullable=False)  # bcrypt hash
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    profile_image_url = Column(String(500))
    role = Column(String(20), nullable=False, default="mentee")  # admin/mentor/mentee/user
    institution = Column(String(200))
    year_of_study = Column(String(50))
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
