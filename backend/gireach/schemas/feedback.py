"""Feedback form and response contracts."""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, field_validator, model_validator

from gireach.schemas.common import ApiModel

QUESTION_TYPES = ("text", "textarea", "radio", "checkbox", "select", "rating")
CHOICE_QUESTION_TYPES = {"radio", "checkbox", "select"}


class FeedbackQuestion(ApiModel):
    id: str = Field(min_length=1)
    type: Literal["text", "textarea", "radio", "checkbox", "select", "rating"] = "text"
    question: str = Field(min_length=1)
    required: bool = False
    options: Optional[List[str]] = None

    @model_validator(mode="after")
    def _options_for_choice_types(self):
        if self.type in CHOICE_QUESTION_TYPES:
            options = [str(v).strip() for v in (self.options or []) if str(v).strip()]
            if not options:
                raise ValueError(f"question '{self.id}' of type '{self.type}' needs at least one option")
            self.options = options
        else:
            self.options = None
        return self


class FeedbackFormCreate(ApiModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    questions: List[FeedbackQuestion] = Field(min_length=1)
    created_by_id: Optional[str] = None

    @field_validator("questions")
    @classmethod
    def _unique_question_ids(cls, value):
        ids = [q.id for q in value]
        if len(ids) != len(set(ids)):
            raise ValueError("question ids must be unique within a form")
        return value


class FeedbackFormRecord(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    questions: List[FeedbackQuestion] = Field(default_factory=list)
    is_active: bool = True
    created_by_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class FeedbackFormSummary(FeedbackFormRecord):
    response_count: int = 0


class FeedbackFormToggle(ApiModel):
    is_active: bool


class FeedbackResponseCreate(ApiModel):
    form_id: str = Field(min_length=1)
    responses: Dict[str, Any]


class FeedbackResponseRecord(ApiModel):
    id: str
    form_id: str
    responses: Dict[str, Any]
    submitted_at: Optional[datetime] = None


class FeedbackResponseSubmitted(ApiModel):
    message: str
    id: str
