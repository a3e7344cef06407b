"""Persistence interface shared by the database and JSON-file backends.

Every method behaves identically in both backends: lookups return the record or
``None`` when missing, ``update_*`` returns ``None`` for an unknown key instead
of raising, ``delete_*`` returns whether something was removed, and I/O or
database failures propagate to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

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


class Storage(ABC):
    # Users
    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserRecord]: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[UserRecord]: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> UserRecord: ...

    @abstractmethod
    def update_user(self, user_id: str, updates: UserUpdate) -> Optional[UserRecord]: ...

    # Website settings
    @abstractmethod
    def get_website_settings(self, setting_key: str) -> Optional[WebsiteSettingsRecord]: ...

    @abstractmethod
    def get_all_website_settings(self) -> List[WebsiteSettingsRecord]: ...

    @abstractmethod
    def save_website_settings(self, data: WebsiteSettingsUpsert) -> WebsiteSettingsRecord: ...

    @abstractmethod
    def update_website_settings(
        self, setting_key: str, setting_value: Any, updated_by_id: Optional[str] = None
    ) -> Optional[WebsiteSettingsRecord]: ...

    # Page content
    @abstractmethod
    def get_page_content(self, page_id: str) -> Optional[PageContentRecord]: ...

    @abstractmethod
    def get_all_page_contents(self) -> List[PageContentRecord]: ...

    @abstractmethod
    def save_page_content(self, data: PageContentUpsert) -> PageContentRecord: ...

    @abstractmethod
    def update_page_content(
        self, page_id: str, updates: PageContentUpdate, updated_by_id: Optional[str] = None
    ) -> Optional[PageContentRecord]: ...

    @abstractmethod
    def delete_page_content(self, page_id: str) -> bool: ...

    # Media library
    @abstractmethod
    def get_media_library(self) -> List[MediaItemRecord]: ...

    @abstractmethod
    def get_media_item(self, media_id: str) -> Optional[MediaItemRecord]: ...

    @abstractmethod
    def upload_media(self, data: MediaItemCreate) -> MediaItemRecord: ...

    @abstractmethod
    def update_media_item(self, media_id: str, updates: MediaItemUpdate) -> Optional[MediaItemRecord]: ...

    @abstractmethod
    def delete_media_item(self, media_id: str) -> bool: ...

    # Feedback forms
    @abstractmethod
    def create_feedback_form(self, data: FeedbackFormCreate) -> FeedbackFormRecord: ...

    @abstractmethod
    def get_feedback_forms(self) -> List[FeedbackFormSummary]: ...

    @abstractmethod
    def get_active_feedback_forms(self) -> List[FeedbackFormRecord]: ...

    @abstractmethod
    def get_feedback_form(self, form_id: str) -> Optional[FeedbackFormRecord]: ...

    @abstractmethod
    def set_feedback_form_active(self, form_id: str, is_active: bool) -> Optional[FeedbackFormRecord]: ...

    @abstractmethod
    def delete_feedback_form(self, form_id: str) -> bool: ...

    @abstractmethod
    def create_feedback_response(self, data: FeedbackResponseCreate) -> FeedbackResponseRecord: ...

    @abstractmethod
    def get_feedback_responses(self, form_id: Optional[str] = None) -> List[FeedbackResponseRecord]: ...

    @abstractmethod
    def delete_feedback_response(self, response_id: str) -> bool: ...

    # Webinars
    @abstractmethod
    def get_webinars(self) -> List[WebinarRecord]: ...

    @abstractmethod
    def get_upcoming_webinars(self) -> List[WebinarRecord]: ...

    @abstractmethod
    def get_webinar(self, webinar_id: str) -> Optional[WebinarRecord]: ...

    @abstractmethod
    def create_webinar(self, data: WebinarCreate) -> WebinarRecord: ...

    @abstractmethod
    def register_for_webinar(self, data: WebinarRegistrationCreate) -> WebinarRegistrationRecord: ...

    @abstractmethod
    def get_webinar_registrations(self, user_id: str) -> List[WebinarRegistrationRecord]: ...

    # Group projects
    @abstractmethod
    def get_group_projects(self) -> List[GroupProjectRecord]: ...

    @abstractmethod
    def get_active_group_projects(self) -> List[GroupProjectRecord]: ...

    @abstractmethod
    def get_group_project(self, project_id: str) -> Optional[GroupProjectRecord]: ...

    @abstractmethod
    def create_group_project(self, data: GroupProjectCreate) -> GroupProjectRecord: ...

    @abstractmethod
    def update_group_project(self, project_id: str, updates: GroupProjectUpdate) -> Optional[GroupProjectRecord]: ...

    @abstractmethod
    def delete_group_project(self, project_id: str) -> bool: ...

    @abstractmethod
    def join_group_project(self, data: GroupProjectParticipantCreate) -> GroupProjectParticipantRecord: ...

    @abstractmethod
    def get_group_project_participants(self, project_id: str) -> List[GroupProjectParticipantRecord]: ...
