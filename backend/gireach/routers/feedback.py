"""Feedback forms API router: public submission plus admin form management."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from gireach.middleware.auth_middleware import require_roles
from gireach.schemas.common import MessageOut
from gireach.schemas.feedback import (
    FeedbackFormCreate,
    FeedbackFormRecord,
    FeedbackFormSummary,
    FeedbackFormToggle,
    FeedbackResponseCreate,
    FeedbackResponseRecord,
    FeedbackResponseSubmitted,
)
from gireach.schemas.user import AuthClaims
from gireach.services import feedback_service
from gireach.storage import Storage, get_storage
from gireach.utils.permissions import ADMIN

router = APIRouter(tags=["feedback"])


@router.get("/api/feedback-forms/active", response_model=List[FeedbackFormRecord])
def list_active_forms(storage: Storage = Depends(get_storage)):
    return storage.get_active_feedback_forms()


@router.post("/api/feedback-responses", response_model=FeedbackResponseSubmitted, status_code=201)
def submit_response(data: FeedbackResponseCreate, storage: Storage = Depends(get_storage)):
    response = feedback_service.submit_response(storage, data)
    return FeedbackResponseSubmitted(message="Feedback response submitted successfully", id=response.id)


@router.get("/api/admin/feedback-forms", response_model=List[FeedbackFormSummary])
def list_forms(
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return storage.get_feedback_forms()


@router.post("/api/admin/feedback-forms", response_model=FeedbackFormRecord, status_code=201)
def create_form(
    data: FeedbackFormCreate,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return feedback_service.create_form(storage, data, current_user.user_id)


@router.put("/api/admin/feedback-forms/{form_id}/toggle", response_model=FeedbackFormRecord)
def toggle_form(
    form_id: str,
    data: FeedbackFormToggle,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    form = storage.set_feedback_form_active(form_id, data.is_active)
    if not form:
        raise HTTPException(status_code=404, detail="Feedback form not found")
    return form


@router.delete("/api/admin/feedback-forms/{form_id}", response_model=MessageOut)
def delete_form(
    form_id: str,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    if not storage.delete_feedback_form(form_id):
        raise HTTPException(status_code=404, detail="Feedback form not found")
    return MessageOut(message="Feedback form deleted successfully")


@router.get("/api/admin/feedback-responses", response_model=List[FeedbackResponseRecord])
def list_responses(
    form_id: Optional[str] = None,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return feedback_service.list_responses(storage, form_id)


@router.get("/api/admin/feedback-responses/{form_id}", response_model=List[FeedbackResponseRecord])
def list_form_responses(
    form_id: str,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return feedback_service.list_responses(storage, form_id)


@router.delete("/api/admin/feedback-responses/{response_id}", response_model=MessageOut)
def delete_response(
    response_id: str,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    if not storage.delete_feedback_response(response_id):
        raise HTTPException(status_code=404, detail="Feedback response not found")
    return MessageOut(message="Feedback response deleted successfully")
