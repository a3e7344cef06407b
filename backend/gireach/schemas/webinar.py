"""Webinar and registration contracts."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from gireach.schemas.common import ApiModel

WebinarStatus = Literal["scheduled", "live", "completed", "cancelled"]


class WebinarCreate(ApiModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    scheduled_date: datetime
    duration: int = Field(default=60, gt=0)
    max_attendees: int = Field(default=100, gt=0)
    meeting_link: Optional[str] = None
    recording_url: Optional[str] = None
    is_public: bool = True
    status: WebinarStatus = "scheduled"
    presenter_id: Optional[str] = None


class WebinarRecord(ApiModel):
    id: str
    title: str
    description: str
    presenter_id: Optional[str] = None
    scheduled_date: datetime
    duration: int = 60
    max_attendees: int = 100
    current_attendees: int = 0
    meeting_link: Optional[str] = None
    recording_url: Optional[str] = None
    is_public: bool = True
    status: str = "scheduled"
    created_at: Optional[datetime] = None


class WebinarRegistrationCreate(ApiModel):
    webinar_id: str
    user_id: str


class WebinarRegistrationRecord(ApiModel):
    id: str
    webinar_id: str
    user_id: str
    registered_at: Optional[datetime] = None
    attended: bool = False
