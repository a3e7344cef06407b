"""Website settings lookups, including first-read initialization of the logo."""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError

from gireach.schemas.settings import WebsiteSettingsRecord, WebsiteSettingsUpsert
from gireach.storage.base import Storage

logger = logging.getLogger(__name__)

LOGO_SETTING_KEY = "logo"

DEFAULT_LOGO_SETTINGS = {
    "type": "icon",
    "iconName": "Stethoscope",
    "iconColor": "text-white",
    "iconBackground": "bg-blue-600",
    "primaryText": "GI REACH",
    "secondaryText": "Academic Excellence",
    "primaryTextColor": "text-gray-900",
    "secondaryTextColor": "text-gray-600",
    "fontSize": "text-2xl",
    "fontWeight": "font-bold",
    "borderRadius": "rounded-xl",
    "showSecondaryText": True,
    "imageWidth": 48,
    "imageHeight": 48,
}


def get_setting(storage: Storage, setting_key: str, user_id: Optional[str] = None) -> WebsiteSettingsRecord:
    record = storage.get_website_settings(setting_key)
    if record:
        return record

    if setting_key == LOGO_SETTING_KEY:
        try:
            record = storage.save_website_settings(
                WebsiteSettingsUpsert(
                    setting_key=LOGO_SETTING_KEY,
                    setting_value=dict(DEFAULT_LOGO_SETTINGS),
                    updated_by_id=user_id,
                )
            )
            logger.info("[settings] initialized default logo settings")
            return record
        except (OSError, SQLAlchemyError):
            logger.exception("[settings] failed to initialize default logo settings")

    raise HTTPException(status_code=404, detail="Settings not found")


def save_setting(storage: Storage, data: WebsiteSettingsUpsert) -> WebsiteSettingsRecord:
    record = storage.save_website_settings(data)
    logger.info("[settings] saved %s", data.setting_key)
    return record


def update_setting(
    storage: Storage, setting_key: str, setting_value, user_id: Optional[str] = None
) -> WebsiteSettingsRecord:
    record = storage.update_website_settings(setting_key, setting_value, user_id)
    if not record:
        raise HTTPException(status_code=404, detail="Settings not found")
    logger.info("[settings] updated %s", setting_key)
    return record
