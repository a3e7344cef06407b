"""SQLAlchemy-backed persistence used when DATABASE_URL is configured."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from gireach.database import create_all_tables, create_db_engine, create_session_factory
from gireach.models.feedback import FeedbackForm, FeedbackResponse
from gireach.models.project import GroupProject, GroupProjectParticipant
from gireach.models.site import MediaItem, PageContent, WebsiteSettings
from gireach.models.user import User
from gireach.models.webinar import Webinar, WebinarRegistration
from gireach.schemas.content import PageContentRecord, PageContentUpdate, PageContentUpsert, dump_sections
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
from gireach.utils.helpers import utcnow

logger = logging.getLogger(__name__)


class DatabaseStorage(Storage):
    def __init__(self, database_url: str = "", engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else create_db_engine(database_url)
        self.SessionLocal = create_session_factory(self.engine)

    def create_tables(self) -> None:
        create_all_tables(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    # Users
    def get_user(self, user_id: str) -> Optional[UserRecord]:
        with self.session() as db:
            user = db.query(User).filter(User.id == user_id).first()
            return UserRecord.model_validate(user) if user else None

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self.session() as db:
            user = db.query(User).filter(User.email == email).first()
            return UserRecord.model_validate(user) if user else None

    def create_user(self, data: UserCreate) -> UserRecord:
        with self.session() as db:
            user = User(**data.model_dump())
            db.add(user)
            db.flush()
            db.refresh(user)
            logger.info("[storage] created user %s with id %s", user.email, user.id)
            return UserRecord.model_validate(user)

    def update_user(self, user_id: str, updates: UserUpdate) -> Optional[UserRecord]:
        with self.session() as db:
            user = db.query(User).filter(User.id == user_id).first()
            if not user:
                return None
            for key, value in updates.model_dump(exclude_unset=True).items():
                setattr(user, key, value)
            user.updated_at = utcnow()
            db.flush()
            return UserRecord.model_validate(user)

    # Website settings
    def get_website_settings(self, setting_key: str) -> Optional[WebsiteSettingsRecord]:
        with self.session() as db:
            row = (
                db.query(WebsiteSettings)
                .filter(WebsiteSettings.setting_key == setting_key, WebsiteSettings.is_active == True)
                .first()
            )
            return WebsiteSettingsRecord.model_validate(row) if row else None

    def get_all_website_settings(self) -> List[WebsiteSettingsRecord]:
        with self.session() as db:
            rows = (
                db.query(WebsiteSettings)
                .filter(WebsiteSettings.is_active == True)
                .order_by(WebsiteSettings.updated_at.desc())
                .all()
            )
            return [WebsiteSettingsRecord.model_validate(r) for r in rows]

    def save_website_settings(self, data: WebsiteSettingsUpsert) -> WebsiteSettingsRecord:
        with self.session() as db:
            row = db.query(WebsiteSettings).filter(WebsiteSettings.setting_key == data.setting_key).first()
            if row:
                row.setting_value = data.setting_value
                row.is_active = True
                row.updated_by_id = data.updated_by_id
                row.updated_at = utcnow()
            else:
                row = WebsiteSettings(
                    setting_key=data.setting_key,
                    setting_value=data.setting_value,
                    is_active=True,
                    updated_by_id=data.updated_by_id,
                )
                db.add(row)
            db.flush()
            return WebsiteSettingsRecord.model_validate(row)

    def update_website_settings(
        self, setting_key: str, setting_value: Any, updated_by_id: Optional[str] = None
    ) -> Optional[WebsiteSettingsRecord]:
        with self.session() as db:
            row = db.query(WebsiteSettings).filter(WebsiteSettings.setting_key == setting_key).first()
            if not row:
                return None
            row.setting_value = setting_value
            row.updated_by_id = updated_by_id
            row.updated_at = utcnow()
            db.flush()
            return WebsiteSettingsRecord.model_validate(row)

    # Page content
    def get_page_content(self, page_id: str) -> Optional[PageContentRecord]:
        with self.session() as db:
            row = (
                db.query(PageContent)
                .filter(PageContent.page_id == page_id, PageContent.is_published == True)
                .first()
            )
            return PageContentRecord.model_validate(row) if row else None

    def get_all_page_contents(self) -> List[PageContentRecord]:
        with self.session() as db:
            rows = (
                db.query(PageContent)
                .filter(PageContent.is_published == True)
                .order_by(PageContent.updated_at.desc())
                .all()
            )
            return [PageContentRecord.model_validate(r) for r in rows]

    def save_page_content(self, data: PageContentUpsert) -> PageContentRecord:
        sections = dump_sections(data.sections)
        with self.session() as db:
            row = db.query(PageContent).filter(PageContent.page_id == data.page_id).first()
            if row:
                row.page_name = data.page_name
                row.sections = sections
                row.is_published = True
                row.updated_by_id = data.updated_by_id
                row.updated_at = utcnow()
            else:
                row = PageContent(
                    page_id=data.page_id,
                    page_name=data.page_name,
                    sections=sections,
                    is_published=True,
                    updated_by_id=data.updated_by_id,
                )
                db.add(row)
            db.flush()
            return PageContentRecord.model_validate(row)

    def update_page_content(
        self, page_id: str, updates: PageContentUpdate, updated_by_id: Optional[str] = None
    ) -> Optional[PageContentRecord]:
        with self.session() as db:
            row = db.query(PageContent).filter(PageContent.page_id == page_id).first()
            if not row:
                return None
            fields = updates.model_fields_set
            if "page_name" in fields and updates.page_name is not None:
                row.page_name = updates.page_name
            if "sections" in fields and updates.sections is not None:
                row.sections = dump_sections(updates.sections)
            if "is_published" in fields and updates.is_published is not None:
                row.is_published = updates.is_published
            row.updated_by_id = updated_by_id
            row.updated_at = utcnow()
            db.flush()
            return PageContentRecord.model_validate(row)

    def delete_page_content(self, page_id: str) -> bool:
        with self.session() as db:
            deleted = db.query(PageContent).filter(PageContent.page_id == page_id).delete()
            return deleted > 0

    # Media library
    def get_media_library(self) -> List[MediaItemRecord]:
        with self.session() as db:
            rows = db.query(MediaItem).order_by(MediaItem.created_at.desc()).all()
            return [MediaItemRecord.model_validate(r) for r in rows]

    def get_media_item(self, media_id: str) -> Optional[MediaItemRecord]:
        with self.session() as db:
            row = db.query(MediaItem).filter(MediaItem.id == media_id).first()
            return MediaItemRecord.model_validate(row) if row else None

    def upload_media(self, data: MediaItemCreate) -> MediaItemRecord:
        with self.session() as db:
            row = MediaItem(**data.model_dump())
            db.add(row)
            db.flush()
            logger.info("[storage] stored media %s with id %s", row.original_name, row.id)
            return MediaItemRecord.model_validate(row)

    def update_media_item(self, media_id: str, updates: MediaItemUpdate) -> Optional[MediaItemRecord]:
        with self.session() as db:
            row = db.query(MediaItem).filter(MediaItem.id == media_id).first()
            if not row:
                return None
            for key, value in updates.model_dump(exclude_unset=True).items():
                setattr(row, key, value)
            db.flush()
            return MediaItemRecord.model_validate(row)

    def delete_media_item(self, media_id: str) -> bool:
        with self.session() as db:
            return db.query(MediaItem).filter(MediaItem.id == media_id).delete() > 0

    # Feedback forms
    def create_feedback_form(self, data: FeedbackFormCreate) -> FeedbackFormRecord:
        with self.session() as db:
            form = FeedbackForm(
                title=data.title,
                description=data.description,
                questions=[q.model_dump(mode="json", by_alias=True) for q in data.questions],
                is_active=True,
                created_by_id=data.created_by_id,
            )
            db.add(form)
            db.flush()
            return FeedbackFormRecord.model_validate(form)

    def get_feedback_forms(self) -> List[FeedbackFormSummary]:
        with self.session() as db:
            counts = dict(
                db.query(FeedbackResponse.form_id, func.count(FeedbackResponse.id))
                .group_by(FeedbackResponse.form_id)
                .all()
            )
            forms = db.query(FeedbackForm).order_by(FeedbackForm.created_at.desc()).all()
            result = []
            for form in forms:
                record = FeedbackFormRecord.model_validate(form)
                result.append(FeedbackFormSummary(**record.model_dump(), response_count=counts.get(form.id, 0)))
            return result

    def get_active_feedback_forms(self) -> List[FeedbackFormRecord]:
        with self.session() as db:
            rows = (
                db.query(FeedbackForm)
                .filter(FeedbackForm.is_active == True)
                .order_by(FeedbackForm.created_at.desc())
                .all()
            )
            return [FeedbackFormRecord.model_validate(r) for r in rows]

    def get_feedback_form(self, form_id: str) -> Optional[FeedbackFormRecord]:
        with self.session() as db:
            row = db.query(FeedbackForm).filter(FeedbackForm.id == form_id).first()
            return FeedbackFormRecord.model_validate(row) if row else None

    def set_feedback_form_active(self, form_id: str, is_active: bool) -> Optional[FeedbackFormRecord]:
        with self.session() as db:
            row = db.query(FeedbackForm).filter(FeedbackForm.id == form_id).first()
            if not row:
                return None
            row.is_active = is_active
            row.updated_at = utcnow()
            db.flush()
            return FeedbackFormRecord.model_validate(row)

    def delete_feedback_form(self, form_id: str) -> bool:
        with self.session() as db:
            row = db.query(FeedbackForm).filter(FeedbackForm.id == form_id).first()
            if not row:
                return False
            db.query(FeedbackResponse).filter(FeedbackResponse.form_id == form_id).delete()
            db.delete(row)
            return True

    def create_feedback_response(self, data: FeedbackResponseCreate) -> FeedbackResponseRecord:
        with self.session() as db:
            row = FeedbackResponse(form_id=data.form_id, responses=data.responses)
            db.add(row)
            db.flush()
            return FeedbackResponseRecord.model_validate(row)

    def get_feedback_responses(self, form_id: Optional[str] = None) -> List[FeedbackResponseRecord]:
        with self.session() as db:
            query = db.query(FeedbackResponse)
            if form_id is not None:
                query = query.filter(FeedbackResponse.form_id == form_id)
            rows = query.order_by(FeedbackResponse.submitted_at.desc()).all()
            return [FeedbackResponseRecord.model_validate(r) for r in rows]

    def delete_feedback_response(self, response_id: str) -> bool:
        with self.session() as db:
            return db.query(FeedbackResponse).filter(FeedbackResponse.id == response_id).delete() > 0

    # Webinars
    def get_webinars(self) -> List[WebinarRecord]:
        with self.session() as db:
            rows = db.query(Webinar).order_by(Webinar.scheduled_date.asc()).all()
            return [WebinarRecord.model_validate(r) for r in rows]

    def get_upcoming_webinars(self) -> List[WebinarRecord]:
        with self.session() as db:
            rows = (
                db.query(Webinar)
                .filter(Webinar.is_public == True, Webinar.status == "scheduled")
                .order_by(Webinar.scheduled_date.asc())
                .all()
            )
            return [WebinarRecord.model_validate(r) for r in rows]

    def get_webinar(self, webinar_id: str) -> Optional[WebinarRecord]:
        with self.session() as db:
            row = db.query(Webinar).filter(Webinar.id == webinar_id).first()
            return WebinarRecord.model_validate(row) if row else None

    def create_webinar(self, data: WebinarCreate) -> WebinarRecord:
        with self.session() as db:
            row = Webinar(current_attendees=0, **data.model_dump())
            db.add(row)
            db.flush()
            return WebinarRecord.model_validate(row)

    def register_for_webinar(self, data: WebinarRegistrationCreate) -> WebinarRegistrationRecord:
        with self.session() as db:
            registration = WebinarRegistration(webinar_id=data.webinar_id, user_id=data.user_id, attended=False)
            db.add(registration)
            webinar = db.query(Webinar).filter(Webinar.id == data.webinar_id).first()
            if webinar:
                webinar.current_attendees = (webinar.current_attendees or 0) + 1
            db.flush()
            return WebinarRegistrationRecord.model_validate(registration)

    def get_webinar_registrations(self, user_id: str) -> List[WebinarRegistrationRecord]:
        with self.session() as db:
            rows = (
                db.query(WebinarRegistration)
                .filter(WebinarRegistration.user_id == user_id)
                .order_by(WebinarRegistration.registered_at.desc())
                .all()
            )
            return [WebinarRegistrationRecord.model_validate(r) for r in rows]

    # Group projects
    def get_group_projects(self) -> List[GroupProjectRecord]:
        with self.session() as db:
            rows = db.query(GroupProject).order_by(GroupProject.created_at.desc()).all()
            return [GroupProjectRecord.model_validate(r) for r in rows]

    def get_active_group_projects(self) -> List[GroupProjectRecord]:
        with self.session() as db:
            rows = (
                db.query(GroupProject)
                .filter(GroupProject.is_public == True)
                .order_by(GroupProject.start_date.is_(None), GroupProject.start_date.asc())
                .all()
            )
            return [GroupProjectRecord.model_validate(r) for r in rows]

    def get_group_project(self, project_id: str) -> Optional[GroupProjectRecord]:
        with self.session() as db:
            row = db.query(GroupProject).filter(GroupProject.id == project_id).first()
            return GroupProjectRecord.model_validate(row) if row else None

    def create_group_project(self, data: GroupProjectCreate) -> GroupProjectRecord:
        with self.session() as db:
            row = GroupProject(current_participants=0, **data.model_dump())
            db.add(row)
            db.flush()
            return GroupProjectRecord.model_validate(row)

    def update_group_project(self, project_id: str, updates: GroupProjectUpdate) -> Optional[GroupProjectRecord]:
        with self.session() as db:
            row = db.query(GroupProject).filter(GroupProject.id == project_id).first()
            if not row:
                return None
            for key, value in updates.model_dump(exclude_unset=True).items():
                setattr(row, key, value)
            row.updated_at = utcnow()
            db.flush()
            return GroupProjectRecord.model_validate(row)

    def delete_group_project(self, project_id: str) -> bool:
        with self.session() as db:
            row = db.query(GroupProject).filter(GroupProject.id == project_id).first()
            if not row:
                return False
            db.query(GroupProjectParticipant).filter(GroupProjectParticipant.project_id == project_id).delete()
            db.delete(row)
            return True

    def join_group_project(self, data: GroupProjectParticipantCreate) -> GroupProjectParticipantRecord:
        with self.session() as db:
            participant = GroupProjectParticipant(
                project_id=data.project_id,
                user_id=data.user_id,
                role=data.role,
                contribution_type=data.contribution_type,
                is_active=True,
            )
            db.add(participant)
            project = db.query(GroupProject).filter(GroupProject.id == data.project_id).first()
            if project:
                project.current_participants = (project.current_participants or 0) + 1
                project.updated_at = utcnow()
            db.flush()
            return GroupProjectParticipantRecord.model_validate(participant)

    def get_group_project_participants(self, project_id: str) -> List[GroupProjectParticipantRecord]:
        with self.session() as db:
            rows = (
                db.query(GroupProjectParticipant)
                .filter(GroupProjectParticipant.project_id == project_id, GroupProjectParticipant.is_active == True)
                .order_by(GroupProjectParticipant.joined_at.asc())
                .all()
            )
            return [GroupProjectParticipantRecord.model_validate(r) for r in rows]
