"""Feedback form management and response validation."""

import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from gireach.schemas.feedback import (
    CHOICE_QUESTION_TYPES,
    FeedbackFormCreate,
    FeedbackFormRecord,
    FeedbackQuestion,
    FeedbackResponseCreate,
    FeedbackResponseRecord,
)
from gireach.storage.base import Storage

logger = logging.getLogger(__name__)

RATING_MIN = 1
RATING_MAX = 5


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _check_answer(question: FeedbackQuestion, value: Any) -> None:
    if question.type == "checkbox":
        values = value if isinstance(value, list) else [value]
        unknown = [v for v in values if v not in (question.options or [])]
        if unknown:
            raise HTTPException(status_code=400, detail=f"Invalid option for question '{question.id}'")
    elif question.type in CHOICE_QUESTION_TYPES:
        if value not in (question.options or []):
            raise HTTPException(status_code=400, detail=f"Invalid option for question '{question.id}'")
    elif question.type == "rating":
        try:
            rating = int(value)
        except (TypeError, ValueError):
            raise HTTPException(status_code=400, detail=f"Rating for question '{question.id}' must be a number")
        if not RATING_MIN <= rating <= RATING_MAX:
            raise HTTPException(
                status_code=400,
                detail=f"Rating for question '{question.id}' must be between {RATING_MIN} and {RATING_MAX}",
            )


def validate_answers(form: FeedbackFormRecord, answers: Dict[str, Any]) -> None:
    questions = {q.id: q for q in form.questions}
    unknown = sorted(set(answers) - set(questions))
    if unknown:
        raise HTTPException(status_code=400, detail=f"Unknown question ids: {', '.join(unknown)}")

    for question in form.questions:
        value = answers.get(question.id)
        if _is_blank(value):
            if question.required:
                raise HTTPException(status_code=400, detail=f"Question '{question.id}' is required")
            continue
        _check_answer(question, value)


def create_form(storage: Storage, data: FeedbackFormCreate, user_id: Optional[str]) -> FeedbackFormRecord:
    form = storage.create_feedback_form(data.model_copy(update={"created_by_id": user_id}))
    logger.info("[feedback] created form %s with %d questions", form.id, len(form.questions))
    return form


def submit_response(storage: Storage, data: FeedbackResponseCreate) -> FeedbackResponseRecord:
    form = storage.get_feedback_form(data.form_id)
    if not form:
        raise HTTPException(status_code=404, detail="Feedback form not found")
    if not form.is_active:
        raise HTTPException(status_code=400, detail="Feedback form is not accepting responses")

    validate_answers(form, data.responses)
    response = storage.create_feedback_response(data)
    logger.info("[feedback] response %s recorded for form %s", response.id, form.id)
    return response


def list_responses(storage: Storage, form_id: Optional[str] = None) -> List[FeedbackResponseRecord]:
    return storage.get_feedback_responses(form_id)
