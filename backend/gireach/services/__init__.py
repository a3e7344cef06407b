"""Service layer package initialization."""

from gireach.services import (
    auth_service,
    settings_service,
    feedback_service,
    webinar_service,
    project_service,
)
