"""Page content API router. Reads are public; writes require an admin."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from gireach.middleware.auth_middleware import require_roles
from gireach.schemas.common import MessageOut
from gireach.schemas.content import PageContentRecord, PageContentUpdate, PageContentUpsert
from gireach.schemas.user import AuthClaims
from gireach.storage import Storage, get_storage
from gireach.utils.permissions import ADMIN

logger = logging.getLogger(__name__)

router = APIRouter(tags=["content"])


@router.get("/api/content", response_model=List[PageContentRecord])
def list_page_contents(storage: Storage = Depends(get_storage)):
    return storage.get_all_page_contents()


@router.get("/api/content/{page_id}", response_model=PageContentRecord)
def get_page_content(page_id: str, storage: Storage = Depends(get_storage)):
    content = storage.get_page_content(page_id)
    if not content:
        raise HTTPException(status_code=404, detail="Page content not found")
    return content


@router.post("/api/admin/content", response_model=PageContentRecord, status_code=201)
def save_page_content(
    data: PageContentUpsert,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    content = storage.save_page_content(data.model_copy(update={"updated_by_id": current_user.user_id}))
    logger.info("[content] page content saved: %s", content.page_id)
    return content


@router.put("/api/admin/content/{page_id}", response_model=PageContentRecord)
def update_page_content(
    page_id: str,
    updates: PageContentUpdate,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    content = storage.update_page_content(page_id, updates, current_user.user_id)
    if not content:
        raise HTTPException(status_code=404, detail="Page content not found")
    return content


@router.delete("/api/admin/content/{page_id}", response_model=MessageOut)
def delete_page_content(
    page_id: str,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    if not storage.delete_page_content(page_id):
        raise HTTPException(status_code=404, detail="Page content not found")
    logger.info("[content] page content deleted: %s", page_id)
    return MessageOut(message="Page content deleted successfully")
