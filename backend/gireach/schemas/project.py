"""Group research project and participant contracts."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from gireach.schemas.common import ApiModel

ProjectType = Literal["meta_analysis", "systematic_review", "original_research"]
ProjectStatus = Literal["recruiting", "active", "analysis", "writing", "completed"]
ParticipantRole = Literal["lead", "co_lead", "contributor", "reviewer"]


class GroupProjectCreate(ApiModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    project_type: ProjectType
    status: ProjectStatus = "recruiting"
    max_participants: int = Field(default=15, gt=0)
    lead_researcher_id: Optional[str] = None
    start_date: Optional[datetime] = None
    expected_completion_date: Optional[datetime] = None
    is_public: bool = True


class GroupProjectUpdate(ApiModel):
    title: Optional[str] = None
    description: Optional[str] = None
    project_type: Optional[ProjectType] = None
    status: Optional[ProjectStatus] = None
    max_participants: Optional[int] = Field(default=None, gt=0)
    start_date: Optional[datetime] = None
    expected_completion_date: Optional[datetime] = None
    is_public: Optional[bool] = None


class GroupProjectRecord(ApiModel):
    id: str
    title: str
    description: str
    project_type: str
    status: str = "recruiting"
    max_participants: int = 15
    current_participants: int = 0
    lead_researcher_id: Optional[str] = None
    start_date: Optional[datetime] = None
    expected_completion_date: Optional[datetime] = None
    is_public: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProjectJoinRequest(ApiModel):
    role: ParticipantRole = "contributor"
    contribution_type: Optional[str] = None


class GroupProjectParticipantCreate(ApiModel):
    project_id: str
    user_id: str
    role: ParticipantRole = "contributor"
    contribution_type: Optional[str] = None


class GroupProjectParticipantRecord(ApiModel):
    id: str
    project_id: str
    user_id: str
    role: str = "contributor"
    contribution_type: Optional[str] = None
    joined_at: Optional[datetime] = None
    is_active: bool = True
