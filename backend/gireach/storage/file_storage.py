"""JSON-file persistence used when no database is configured.

Each entity family lives in one JSON file holding an array of full records. The
whole family is loaded into memory on first use, and every mutation rewrites
the file before returning.
"""

import json
import logging
import os
import tempfile
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel

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
from gireach.utils.helpers import new_id, utcnow

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

USERS_FILE = "users.json"
SETTINGS_FILE = "website-settings.json"
CONTENT_FILE = "page-contents.json"
MEDIA_FILE = "media-library.json"
FEEDBACK_FORMS_FILE = "feedback-forms.json"
FEEDBACK_RESPONSES_FILE = "feedback-responses.json"
WEBINARS_FILE = "webinars.json"
WEBINAR_REGISTRATIONS_FILE = "webinar-registrations.json"
PROJECTS_FILE = "group-projects.json"
PROJECT_PARTICIPANTS_FILE = "group-project-participants.json"


def _sort_key(value: Optional[datetime]) -> float:
    return value.timestamp() if value is not None else float("-inf")


class JsonCollection(Generic[R]):
    """One entity family: an in-memory mapping keyed by ``key_of`` mirrored to one JSON file."""

    def __init__(self, path: Path, model: Type[R], key_of: Callable[[R], str]):
        self.path = path
        self.model = model
        self.key_of = key_of
        self.lock = threading.RLock()
        self._rows: Dict[str, R] = {}

    def load(self) -> None:
        if not self.path.exists():
            logger.info("[storage] no existing %s found, starting fresh", self.path.name)
            return
        with self.path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
        self._rows = {}
        for item in raw:
            record = self.model.model_validate(item)
            self._rows[self.key_of(record)] = record
        logger.info("[storage] loaded %d records from %s", len(self._rows), self.path.name)

    def flush(self) -> None:
        payload = [row.model_dump(mode="json", by_alias=True) for row in self._rows.values()]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def get(self, key: str) -> Optional[R]:
        row = self._rows.get(key)
        return row.model_copy(deep=True) if row is not None else None

    def values(self) -> Iterator[R]:
        for row in list(self._rows.values()):
            yield row.model_copy(deep=True)

    def put(self, record: R) -> R:
        self._rows[self.key_of(record)] = record
        self.flush()
        return record.model_copy(deep=True)

    def remove(self, key: str) -> bool:
        if key not in self._rows:
            return False
        del self._rows[key]
        self.flush()
        return True

    def remove_where(self, predicate: Callable[[R], bool]) -> int:
        doomed = [key for key, row in self._rows.items() if predicate(row)]
        for key in doomed:
            del self._rows[key]
        if doomed:
            self.flush()
        return len(doomed)


class FileStorage(Storage):
    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)
        self._initialized = False
        self._init_lock = threading.Lock()
        self.users: JsonCollection[UserRecord] = JsonCollection(self.data_dir / USERS_FILE, UserRecord, lambda r: r.id)
        self._users_by_email: Dict[str, str] = {}
        self.settings: JsonCollection[WebsiteSettingsRecord] = JsonCollection(
            self.data_dir / SETTINGS_FILE, WebsiteSettingsRecord, lambda r: r.setting_key
        )
        self.contents: JsonCollection[PageContentRecord] = JsonCollection(
            self.data_dir / CONTENT_FILE, PageContentRecord, lambda r: r.page_id
        )
        self.media: JsonCollection[MediaItemRecord] = JsonCollection(
            self.data_dir / MEDIA_FILE, MediaItemRecord, lambda r: r.id
        )
        self.feedback_forms: JsonCollection[FeedbackFormRecord] = JsonCollection(
            self.data_dir / FEEDBACK_FORMS_FILE, FeedbackFormRecord, lambda r: r.id
        )
        self.feedback_responses: JsonCollection[FeedbackResponseRecord] = JsonCollection(
            self.data_dir / FEEDBACK_RESPONSES_FILE, FeedbackResponseRecord, lambda r: r.id
        )
        self.webinars: JsonCollection[WebinarRecord] = JsonCollection(
            self.data_dir / WEBINARS_FILE, WebinarRecord, lambda r: r.id
        )
        self.webinar_registrations: JsonCollection[WebinarRegistrationRecord] = JsonCollection(
            self.data_dir / WEBINAR_REGISTRATIONS_FILE, WebinarRegistrationRecord, lambda r: r.id
        )
        self.projects: JsonCollection[GroupProjectRecord] = JsonCollection(
            self.data_dir / PROJECTS_FILE, GroupProjectRecord, lambda r: r.id
        )
        self.project_participants: JsonCollection[GroupProjectParticipantRecord] = JsonCollection(
            self.data_dir / PROJECT_PARTICIPANTS_FILE, GroupProjectParticipantRecord, lambda r: r.id
        )

    def _collections(self) -> List[JsonCollection]:
        return [
            self.users, self.settings, self.contents, self.media,
            self.feedback_forms, self.feedback_responses,
            self.webinars, self.webinar_registrations,
            self.projects, self.project_participants,
        ]

    def init(self) -> None:
        if self._initialized:
            return
        with self._init_lock:
            if self._initialized:
                return
            self.data_dir.mkdir(parents=True, exist_ok=True)
            for collection in self._collections():
                collection.load()
            self._users_by_email = {row.email: row.id for row in self.users.values()}
            self._initialized = True

    # Users
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        self.init()
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        self.init()
        user_id = self._users_by_email.get(email)
        return self.users.get(user_id) if user_id else None

    def create_user(self, data: UserCreate) -> UserRecord:
        self.init()
        now = utcnow()
        user = UserRecord(id=new_id(), created_at=now, updated_at=now, **data.model_dump())
        with self.users.lock:
            saved = self.users.put(user)
            self._users_by_email[user.email] = user.id
        logger.info("[storage] created user %s with id %s", user.email, user.id)
        return saved

    def update_user(self, user_id: str, updates: UserUpdate) -> Optional[UserRecord]:
        self.init()
        with self.users.lock:
            existing = self.users.get(user_id)
            if existing is None:
                return None
            changes = updates.model_dump(exclude_unset=True)
            updated = existing.model_copy(update={**changes, "updated_at": utcnow()})
            saved = self.users.put(updated)
            if updated.email != existing.email:
                self._users_by_email.pop(existing.email, None)
                self._users_by_email[updated.email] = updated.id
        return saved

    # Website settings
    def get_website_settings(self, setting_key: str) -> Optional[WebsiteSettingsRecord]:
        self.init()
        row = self.settings.get(setting_key)
        return row if row is not None and row.is_active else None

    def get_all_website_settings(self) -> List[WebsiteSettingsRecord]:
        self.init()
        rows = [row for row in self.settings.values() if row.is_active]
        return sorted(rows, key=lambda r: _sort_key(r.updated_at), reverse=True)

    def save_website_settings(self, data: WebsiteSettingsUpsert) -> WebsiteSettingsRecord:
        self.init()
        now = utcnow()
        with self.settings.lock:
            existing = self.settings.get(data.setting_key)
            record = WebsiteSettingsRecord(
                id=existing.id if existing else new_id(),
                setting_key=data.setting_key,
                setting_value=data.setting_value,
                is_active=True,
                updated_by_id=data.updated_by_id,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            return self.settings.put(record)

    def update_website_settings(
        self, setting_key: str, setting_value: Any, updated_by_id: Optional[str] = None
    ) -> Optional[WebsiteSettingsRecord]:
        self.init()
        with self.settings.lock:
            existing = self.settings.get(setting_key)
            if existing is None:
                return None
            updated = existing.model_copy(
                update={"setting_value": setting_value, "updated_by_id": updated_by_id, "updated_at": utcnow()}
            )
            return self.settings.put(updated)

    # Page content
    def get_page_content(self, page_id: str) -> Optional[PageContentRecord]:
        self.init()
        row = self.contents.get(page_id)
        return row if row is not None and row.is_published else None

    def get_all_page_contents(self) -> List[PageContentRecord]:
        self.init()
        rows = [row for row in self.contents.values() if row.is_published]
        return sorted(rows, key=lambda r: _sort_key(r.updated_at), reverse=True)

    def save_page_content(self, data: PageContentUpsert) -> PageContentRecord:
        self.init()
        now = utcnow()
        with self.contents.lock:
            existing = self.contents.get(data.page_id)
            record = PageContentRecord(
                id=existing.id if existing else new_id(),
                page_id=data.page_id,
                page_name=data.page_name,
                sections=data.sections,
                is_published=True,
                updated_by_id=data.updated_by_id,
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )
            return self.contents.put(record)

    def update_page_content(
        self, page_id: str, updates: PageContentUpdate, updated_by_id: Optional[str] = None
    ) -> Optional[PageContentRecord]:
        self.init()
        with self.contents.lock:
            existing = self.contents.get(page_id)
            if existing is None:
                return None
            changes = {name: getattr(updates, name) for name in updates.model_fields_set}
            changes["updated_by_id"] = updated_by_id
            changes["updated_at"] = utcnow()
            updated = existing.model_copy(update=changes)
            return self.contents.put(updated)

    def delete_page_content(self, page_id: str) -> bool:
        self.init()
        with self.contents.lock:
            return self.contents.remove(page_id)

    # Media library
    def get_media_library(self) -> List[MediaItemRecord]:
        self.init()
        return sorted(self.media.values(), key=lambda r: _sort_key(r.created_at), reverse=True)

    def get_media_item(self, media_id: str) -> Optional[MediaItemRecord]:
        self.init()
        return self.media.get(media_id)

    def upload_media(self, data: MediaItemCreate) -> MediaItemRecord:
        self.init()
        media = MediaItemRecord(id=new_id(), created_at=utcnow(), **data.model_dump())
        with self.media.lock:
            saved = self.media.put(media)
        logger.info("[storage] stored media %s with id %s", media.original_name, media.id)
        return saved

    def update_media_item(self, media_id: str, updates: MediaItemUpdate) -> Optional[MediaItemRecord]:
        self.init()
        with self.media.lock:
            existing = self.media.get(media_id)
            if existing is None:
                return None
            return self.media.put(existing.model_copy(update=updates.model_dump(exclude_unset=True)))

    def delete_media_item(self, media_id: str) -> bool:
        self.init()
        with self.media.lock:
            return self.media.remove(media_id)

    # Feedback forms
    def create_feedback_form(self, data: FeedbackFormCreate) -> FeedbackFormRecord:
        self.init()
        now = utcnow()
        form = FeedbackFormRecord(
            id=new_id(),
            title=data.title,
            description=data.description,
            questions=data.questions,
            is_active=True,
            created_by_id=data.created_by_id,
            created_at=now,
            updated_at=now,
        )
        with self.feedback_forms.lock:
            return self.feedback_forms.put(form)

    def get_feedback_forms(self) -> List[FeedbackFormSummary]:
        self.init()
        counts: Dict[str, int] = {}
        for response in self.feedback_responses.values():
            counts[response.form_id] = counts.get(response.form_id, 0) + 1
        forms = sorted(self.feedback_forms.values(), key=lambda r: _sort_key(r.created_at), reverse=True)
        return [FeedbackFormSummary(**form.model_dump(), response_count=counts.get(form.id, 0)) for form in forms]

    def get_active_feedback_forms(self) -> List[FeedbackFormRecord]:
        self.init()
        forms = [form for form in self.feedback_forms.values() if form.is_active]
        return sorted(forms, key=lambda r: _sort_key(r.created_at), reverse=True)

    def get_feedback_form(self, form_id: str) -> Optional[FeedbackFormRecord]:
        self.init()
        return self.feedback_forms.get(form_id)

    def set_feedback_form_active(self, form_id: str, is_active: bool) -> Optional[FeedbackFormRecord]:
        self.init()
        with self.feedback_forms.lock:
            existing = self.feedback_forms.get(form_id)
            if existing is None:
                return None
            return self.feedback_forms.put(existing.model_copy(update={"is_active": is_active, "updated_at": utcnow()}))

    def delete_feedback_form(self, form_id: str) -> bool:
        self.init()
        with self.feedback_forms.lock, self.feedback_responses.lock:
            if self.feedback_forms.get(form_id) is None:
                return False
            self.feedback_responses.remove_where(lambda r: r.form_id == form_id)
            return self.feedback_forms.remove(form_id)

    def create_feedback_response(self, data: FeedbackResponseCreate) -> FeedbackResponseRecord:
        self.init()
        response = FeedbackResponseRecord(
            id=new_id(), form_id=data.form_id, responses=data.responses, submitted_at=utcnow()
        )
        with self.feedback_responses.lock:
            return self.feedback_responses.put(response)

    def get_feedback_responses(self, form_id: Optional[str] = None) -> List[FeedbackResponseRecord]:
        self.init()
        rows = [r for r in self.feedback_responses.values() if form_id is None or r.form_id == form_id]
        return sorted(rows, key=lambda r: _sort_key(r.submitted_at), reverse=True)

    def delete_feedback_response(self, response_id: str) -> bool:
        self.init()
        with self.feedback_responses.lock:
            return self.feedback_responses.remove(response_id)

    # Webinars
    def get_webinars(self) -> List[WebinarRecord]:
        self.init()
        return sorted(self.webinars.values(), key=lambda r: _sort_key(r.scheduled_date))

    def get_upcoming_webinars(self) -> List[WebinarRecord]:
        self.init()
        rows = [w for w in self.webinars.values() if w.is_public and w.status == "scheduled"]
        return sorted(rows, key=lambda r: _sort_key(r.scheduled_date))

    def get_webinar(self, webinar_id: str) -> Optional[WebinarRecord]:
        self.init()
        return self.webinars.get(webinar_id)

    def create_webinar(self, data: WebinarCreate) -> WebinarRecord:
        self.init()
        webinar = WebinarRecord(id=new_id(), current_attendees=0, created_at=utcnow(), **data.model_dump())
        with self.webinars.lock:
            return self.webinars.put(webinar)

    def register_for_webinar(self, data: WebinarRegistrationCreate) -> WebinarRegistrationRecord:
        self.init()
        registration = WebinarRegistrationRecord(
            id=new_id(), webinar_id=data.webinar_id, user_id=data.user_id, registered_at=utcnow(), attended=False
        )
        with self.webinars.lock, self.webinar_registrations.lock:
            webinar = self.webinars.get(data.webinar_id)
            saved = self.webinar_registrations.put(registration)
            if webinar is not None:
                self.webinars.put(webinar.model_copy(update={"current_attendees": webinar.current_attendees + 1}))
        return saved

    def get_webinar_registrations(self, user_id: str) -> List[WebinarRegistrationRecord]:
        self.init()
        rows = [r for r in self.webinar_registrations.values() if r.user_id == user_id]
        return sorted(rows, key=lambda r: _sort_key(r.registered_at), reverse=True)

    # Group projects
    def get_group_projects(self) -> List[GroupProjectRecord]:
        self.init()
        return sorted(self.projects.values(), key=lambda r: _sort_key(r.created_at), reverse=True)

    def get_active_group_projects(self) -> List[GroupProjectRecord]:
        self.init()
        rows = [p for p in self.projects.values() if p.is_public]
        return sorted(rows, key=lambda r: (r.start_date is None, _sort_key(r.start_date)))

    def get_group_project(self, project_id: str) -> Optional[GroupProjectRecord]:
        self.init()
        return self.projects.get(project_id)

    def create_group_project(self, data: GroupProjectCreate) -> GroupProjectRecord:
        self.init()
        now = utcnow()
        project = GroupProjectRecord(
            id=new_id(), current_participants=0, created_at=now, updated_at=now, **data.model_dump()
        )
        with self.projects.lock:
            return self.projects.put(project)

    def update_group_project(self, project_id: str, updates: GroupProjectUpdate) -> Optional[GroupProjectRecord]:
        self.init()
        with self.projects.lock:
            existing = self.projects.get(project_id)
            if existing is None:
                return None
            changes = updates.model_dump(exclude_unset=True)
            changes["updated_at"] = utcnow()
            return self.projects.put(existing.model_copy(update=changes))

    def delete_group_project(self, project_id: str) -> bool:
        self.init()
        with self.projects.lock, self.project_participants.lock:
            if self.projects.get(project_id) is None:
                return False
            self.project_participants.remove_where(lambda r: r.project_id == project_id)
            return self.projects.remove(project_id)

    def join_group_project(self, data: GroupProjectParticipantCreate) -> GroupProjectParticipantRecord:
        self.init()
        participant = GroupProjectParticipantRecord(
            id=new_id(),
            project_id=data.project_id,
            user_id=data.user_id,
            role=data.role,
            contribution_type=data.contribution_type,
            joined_at=utcnow(),
            is_active=True,
        )
        with self.projects.lock, self.project_participants.lock:
            project = self.projects.get(data.project_id)
            saved = self.project_participants.put(participant)
            if project is not None:
                self.projects.put(
                    project.model_copy(
                        update={"current_participants": project.current_participants + 1, "updated_at": utcnow()}
                    )
                )
        return saved

    def get_group_project_participants(self, project_id: str) -> List[GroupProjectParticipantRecord]:
        self.init()
        rows = [r for r in self.project_participants.values() if r.project_id == project_id and r.is_active]
        return sorted(rows, key=lambda r: _sort_key(r.joined_at))
