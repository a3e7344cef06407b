"""Website settings API router."""

from typing import List

from fastapi import APIRouter, Depends

from gireach.middleware.auth_middleware import get_optional_user, require_roles
from gireach.schemas.settings import WebsiteSettingsRecord, WebsiteSettingsUpdate, WebsiteSettingsUpsert
from gireach.schemas.user import AuthClaims
from gireach.services import settings_service
from gireach.storage import Storage, get_storage
from gireach.utils.permissions import ADMIN

router = APIRouter(prefix="/api/admin/settings", tags=["settings"])


@router.get("", response_model=List[WebsiteSettingsRecord])
def list_settings(storage: Storage = Depends(get_storage)):
    return storage.get_all_website_settings()


@router.get("/{setting_key}", response_model=WebsiteSettingsRecord)
def get_setting(
    setting_key: str,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims | None = Depends(get_optional_user),
):
    return settings_service.get_setting(storage, setting_key, current_user.user_id if current_user else None)


@router.post("", response_model=WebsiteSettingsRecord, status_code=201)
def save_setting(
    data: WebsiteSettingsUpsert,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return settings_service.save_setting(storage, data.model_copy(update={"updated_by_id": current_user.user_id}))


@router.put("/{setting_key}", response_model=WebsiteSettingsRecord)
def update_setting(
    setting_key: str,
    data: WebsiteSettingsUpdate,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return settings_service.update_setting(storage, setting_key, data.setting_value, current_user.user_id)
