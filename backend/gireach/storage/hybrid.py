"""Process-wide choice between the database and JSON-file backends."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Union

from gireach.schemas.content import PageContentRecord, PageContentUpdate, PageContentUpsert
from gireach.schemas.feedback import (
    FeedbackFormCreate,
    FeedbackFormRecord,
    FeedbackFormSummary,
    FeedbackResponseCreate,
    FeedbackResponseRecord,
)
from gireach.schemas.media import MediaItemCreate, MediaItemRecord, MediaItemUpdate
from gireach.schemas.project import (
    GroupProjectCreate,
    GroupProjectParticipantCreate,
    GroupProjectParticipantRecord,
    GroupProjectRecord,
    GroupProjectUpdate,
)
from gireach.schemas.settings import WebsiteSettingsRecord, WebsiteSettingsUpsert
from gireach.schemas.user import UserCreate, UserRecord, UserUpdate
from gireach.schemas.webinar import WebinarCreate, WebinarRecord, WebinarRegistrationCreate, WebinarRegistrationRecord
from gireach.storage.base import Storage
from gireach.storage.database_storage import DatabaseStorage
from gireach.storage.file_storage import FileStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DatabaseBackend:
    url: str


@dataclass(frozen=True)
class FileBackend:
    path: Path


StorageBackend = Union[DatabaseBackend, FileBackend]


def resolve_backend(config) -> StorageBackend:
    """Pick the backend from settings: a configured DATABASE_URL wins, otherwise files under DATA_DIR."""
    if config.DATABASE_URL:
        return DatabaseBackend(url=config.DATABASE_URL)
    return FileBackend(path=Path(config.DATA_DIR))


class HybridStorage(Storage):
    """Forwards every storage call to the one backend chosen at construction time.

    The choice is never re-evaluated, so two backends never serve the same key
    within one process.
    """

    def __init__(self, backend: StorageBackend):
        self.backend = backend
        if isinstance(backend, DatabaseBackend):
            self.delegate: Storage = DatabaseStorage(backend.url)
            logger.info("[storage] using database backend")
        elif isinstance(backend, FileBackend):
            self.delegate = FileStorage(backend.path)
            logger.info("[storage] no database configured, using file backend at %s", backend.path)
        else:
            raise TypeError(f"Unsupported storage backend: {backend!r}")

    @property
    def uses_database(self) -> bool:
        return isinstance(self.delegate, DatabaseStorage)

    # Users
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        return self.delegate.get_user(user_id)

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        return self.delegate.get_user_by_email(email)

    def create_user(self, data: UserCreate) -> UserRecord:
        return self.delegate.create_user(data)

    def update_user(self, user_id: str, updates: UserUpdate) -> Optional[UserRecord]:
        return self.delegate.update_user(user_id, updates)

    # Website settings
    def get_website_settings(self, setting_key: str) -> Optional[WebsiteSettingsRecord]:
        return self.delegate.get_website_settings(setting_key)

    def get_all_website_settings(self) -> List[WebsiteSettingsRecord]:
        return self.delegate.get_all_website_settings()

    def save_website_settings(self, data: WebsiteSettingsUpsert) -> WebsiteSettingsRecord:
        return self.delegate.save_website_settings(data)

    def update_website_settings(
        self, setting_key: str, setting_value: Any, updated_by_id: Optional[str] = None
    ) -> Optional[WebsiteSettingsRecord]:
        return self.delegate.update_website_settings(setting_key, setting_value, updated_by_id)

    # Page content
    def get_page_content(self, page_id: str) -> Optional[PageContentRecord]:
        return self.delegate.get_page_content(page_id)

    def get_all_page_contents(self) -> List[PageContentRecord]:
        return self.delegate.get_all_page_contents()

    def save_page_content(self, data: PageContentUpsert) -> PageContentRecord:
        return self.delegate.save_page_content(data)

    def update_page_content(
        self, page_id: str, updates: PageContentUpdate, updated_by_id: Optional[str] = None
    ) -> Optional[PageContentRecord]:
        return self.delegate.update_page_content(page_id, updates, updated_by_id)

    def delete_page_content(self, page_id: str) -> bool:
        return self.delegate.delete_page_content(page_id)

    # Media library
    def get_media_library(self) -> List[MediaItemRecord]:
        return self.delegate.get_media_library()

    def get_media_item(self, media_id: str) -> Optional[MediaItemRecord]:
        return self.delegate.get_media_item(media_id)

    def upload_media(self, data: MediaItemCreate) -> MediaItemRecord:
        return self.delegate.upload_media(data)

    def update_media_item(self, media_id: str, updates: MediaItemUpdate) -> Optional[MediaItemRecord]:
        return self.delegate.update_media_item(media_id, updates)

    def delete_media_item(self, media_id: str) -> bool:
        return self.delegate.delete_media_item(media_id)

    # Feedback
    def create_feedback_form(self, data: FeedbackFormCreate) -> FeedbackFormRecord:
        return self.delegate.create_feedback_form(data)

    def get_feedback_forms(self) -> List[FeedbackFormSummary]:
        return self.delegate.get_feedback_forms()

    def get_active_feedback_forms(self) -> List[FeedbackFormRecord]:
        return self.delegate.get_active_feedback_forms()

    def get_feedback_form(self, form_id: str) -> Optional[FeedbackFormRecord]:
        return self.delegate.get_feedback_form(form_id)

    def set_feedback_form_active(self, form_id: str, is_active: bool) -> Optional[FeedbackFormRecord]:
        return self.delegate.set_feedback_form_active(form_id, is_active)

    def delete_feedback_form(self, form_id: str) -> bool:
        return self.delegate.delete_feedback_form(form_id)

    def create_feedback_response(self, data: FeedbackResponseCreate) -> FeedbackResponseRecord:
        return self.delegate.create_feedback_response(data)

    def get_feedback_responses(self, form_id: Optional[str] = None) -> List[FeedbackResponseRecord]:
        return self.delegate.get_feedback_responses(form_id)

    def delete_feedback_response(self, response_id: str) -> bool:
        return self.delegate.delete_feedback_response(response_id)

    # Webinars
    def get_webinars(self) -> List[WebinarRecord]:
        return self.delegate.get_webinars()

    def get_upcoming_webinars(self) -> List[WebinarRecord]:
        return self.delegate.get_upcoming_webinars()

    def get_webinar(self, webinar_id: str) -> Optional[WebinarRecord]:
        return self.delegate.get_webinar(webinar_id)

    def create_webinar(self, data: WebinarCreate) -> WebinarRecord:
        return self.delegate.create_webinar(data)

    def register_for_webinar(self, data: WebinarRegistrationCreate) -> WebinarRegistrationRecord:
        return self.delegate.register_for_webinar(data)

    def get_webinar_registrations(self, user_id: str) -> List[WebinarRegistrationRecord]:
        return self.delegate.get_webinar_registrations(user_id)

    # Group projects
    def get_group_projects(self) -> List[GroupProjectRecord]:
        return self.delegate.get_group_projects()

    def get_active_group_projects(self) -> List[GroupProjectRecord]:
        return self.delegate.get_active_group_projects()

    def get_group_project(self, project_id: str) -> Optional[GroupProjectRecord]:
        return self.delegate.get_group_project(project_id)

    def create_group_project(self, data: GroupProjectCreate) -> GroupProjectRecord:
        return self.delegate.create_group_project(data)

    def update_group_project(self, project_id: str, updates: GroupProjectUpdate) -> Optional[GroupProjectRecord]:
        return self.delegate.update_group_project(project_id, updates)

    def delete_group_project(self, project_id: str) -> bool:
        return self.delegate.delete_group_project(project_id)

    def join_group_project(self, data: GroupProjectParticipantCreate) -> GroupProjectParticipantRecord:
        return self.delegate.join_group_project(data)

    def get_group_project_participants(self, project_id: str) -> List[GroupProjectParticipantRecord]:
        return self.delegate.get_group_project_participants(project_id)
