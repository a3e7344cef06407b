"""Webinar scheduling and attendee registration rules."""

import logging

from fastapi import HTTPException

from gireach.schemas.user import AuthClaims
from gireach.schemas.webinar import WebinarCreate, WebinarRecord, WebinarRegistrationCreate, WebinarRegistrationRecord
from gireach.storage.base import Storage

logger = logging.getLogger(__name__)


def create_webinar(storage: Storage, data: WebinarCreate, current_user: AuthClaims) -> WebinarRecord:
    webinar = storage.create_webinar(data.model_copy(update={"presenter_id": current_user.user_id}))
    logger.info("[webinar] %s scheduled webinar %s", current_user.email, webinar.id)
    return webinar


def register(storage: Storage, webinar_id: str, current_user: AuthClaims) -> WebinarRegistrationRecord:
    webinar = storage.get_webinar(webinar_id)
    if not webinar:
        raise HTTPException(status_code=404, detail="Webinar not found")
    if webinar.status != "scheduled":
        raise HTTPException(status_code=400, detail="Webinar is not open for registration")

    existing = storage.get_webinar_registrations(current_user.user_id)
    if any(r.webinar_id == webinar_id for r in existing):
        raise HTTPException(status_code=400, detail="Already registered for this webinar")
    if webinar.current_attendees >= webinar.max_attendees:
        raise HTTPException(status_code=400, detail="Webinar is full")

    registration = storage.register_for_webinar(
        WebinarRegistrationCreate(webinar_id=webinar_id, user_id=current_user.user_id)
    )
    logger.info("[webinar] %s registered for %s", current_user.email, webinar_id)
    return registration
