"""Webinars API router."""

from typing import List

from fastapi import APIRouter, Depends

from gireach.middleware.auth_middleware import get_current_user, require_roles
from gireach.schemas.user import AuthClaims
from gireach.schemas.webinar import WebinarCreate, WebinarRecord, WebinarRegistrationRecord
from gireach.services import webinar_service
from gireach.storage import Storage, get_storage
from gireach.utils.permissions import ADMIN_MENTOR

router = APIRouter(prefix="/api/webinars", tags=["webinars"])


@router.get("", response_model=List[WebinarRecord])
def list_upcoming_webinars(storage: Storage = Depends(get_storage)):
    return storage.get_upcoming_webinars()


@router.post("", response_model=WebinarRecord, status_code=201)
def create_webinar(
    data: WebinarCreate,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(require_roles(*ADMIN_MENTOR)),
):
    return webinar_service.create_webinar(storage, data, current_user)


@router.get("/my-registrations", response_model=List[WebinarRegistrationRecord])
def my_registrations(
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(get_current_user),
):
    return storage.get_webinar_registrations(current_user.user_id)


@router.post("/{webinar_id}/register", response_model=WebinarRegistrationRecord, status_code=201)
def register_for_webinar(
    webinar_id: str,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(get_current_user),
):
    return webinar_service.register(storage, webinar_id, current_user)
