"""Media library API router. Admin only."""

import logging
import os
from typing import List

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from gireach.config import settings
from gireach.middleware.auth_middleware import require_roles
from gireach.schemas.common import MessageOut
from gireach.schemas.media import MediaItemCreate, MediaItemRecord, MediaItemUpdate
from gireach.schemas.user import AuthClaims
from gireach.storage import Storage, get_storage
from gireach.utils.helpers import save_upload
from gireach.utils.permissions import ADMIN

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/media", tags=["media"])

MEDIA_SUBFOLDER = "media"


@router.get("", response_model=List[MediaItemRecord])
def list_media(
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return storage.get_media_library()


@router.post("", response_model=MediaItemRecord, status_code=201)
async def upload_media(
    file: UploadFile = File(...),
    alt_text: str = Form(""),
    description: str = Form(""),
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    saved = await save_upload(file, subfolder=MEDIA_SUBFOLDER)
    media = storage.upload_media(
        MediaItemCreate(
            file_name=saved["file_name"],
            original_name=saved["original_name"],
            file_type="image",
            mime_type=saved["mime_type"],
            file_size=saved["size"],
            file_url=saved["url"],
            alt_text=alt_text,
            description=description,
            uploaded_by_id=current_user.user_id,
        )
    )
    logger.info("[media] %s uploaded %s", current_user.email, media.file_name)
    return media


@router.get("/{media_id}", response_model=MediaItemRecord)
def get_media_item(
    media_id: str,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    media = storage.get_media_item(media_id)
    if not media:
        raise HTTPException(status_code=404, detail="Media item not found")
    return media


@router.put("/{media_id}", response_model=MediaItemRecord)
def update_media_item(
    media_id: str,
    updates: MediaItemUpdate,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    media = storage.update_media_item(media_id, updates)
    if not media:
        raise HTTPException(status_code=404, detail="Media item not found")
    return media


@router.delete("/{media_id}", response_model=MessageOut)
def delete_media_item(
    media_id: str,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    media = storage.get_media_item(media_id)
    if not media or not storage.delete_media_item(media_id):
        raise HTTPException(status_code=404, detail="Media item not found")

    path = os.path.join(settings.UPLOAD_DIR, MEDIA_SUBFOLDER, media.file_name)
    if os.path.exists(path):
        os.remove(path)
    logger.info("[media] deleted %s", media.file_name)
    return MessageOut(message="Media item deleted successfully")
