"""SQLAlchemy model package initialization."""

from gireach.models.user import User
from gireach.models.site import WebsiteSettings, PageContent, MediaItem
from gireach.models.feedback import FeedbackForm, FeedbackResponse
from gireach.models.webinar import Webinar, WebinarRegistration
from gireach.models.project import GroupProject, GroupProjectParticipant

__all__ = [
    "User",
    "WebsiteSettings", "PageContent", "MediaItem",
    "FeedbackForm", "FeedbackResponse",
    "Webinar", "WebinarRegistration",
    "GroupProject", "GroupProjectParticipant",
]
