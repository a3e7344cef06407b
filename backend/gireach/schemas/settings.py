"""Website settings request/response contracts (generic key-value site configuration)."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from gireach.schemas.common import ApiModel


class WebsiteSettingsUpsert(ApiModel):
    setting_key: str = Field(min_length=1, max_length=100)
    setting_value: Any
    updated_by_id: Optional[str] = None


class WebsiteSettingsUpdate(ApiModel):
    setting_value: Any


class WebsiteSettingsRecord(ApiModel):
    id: str
    setting_key: str
    setting_value: Any
    is_active: bool = True
    updated_by_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
