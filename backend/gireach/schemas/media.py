"""Media library request/response contracts."""

from datetime import datetime
from typing import Optional

from gireach.schemas.common import ApiModel


class MediaItemCreate(ApiModel):
    file_name: str
    original_name: str
    file_type: str = "image"
    mime_type: str
    file_size: int
    file_url: str
    alt_text: Optional[str] = ""
    description: Optional[str] = ""
    uploaded_by_id: Optional[str] = None


class MediaItemUpdate(ApiModel):
    alt_text: Optional[str] = None
    description: Optional[str] = None


class MediaItemRecord(ApiModel):
    id: str
    file_name: str
    original_name: str
    file_type: str
    mime_type: str
    file_size: int
    file_url: str
    alt_text: Optional[str] = None
    description: Optional[str] = None
    uploaded_by_id: Optional[str] = None
    created_at: Optional[datetime] = None
