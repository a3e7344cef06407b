"""Group research project creation, membership and admin updates."""

import logging

from fastapi import HTTPException

from gireach.schemas.project import (
    GroupProjectCreate,
    GroupProjectParticipantCreate,
    GroupProjectParticipantRecord,
    GroupProjectRecord,
    GroupProjectUpdate,
    ProjectJoinRequest,
)
from gireach.schemas.user import AuthClaims
from gireach.storage.base import Storage

logger = logging.getLogger(__name__)


def _get_project_or_404(storage: Storage, project_id: str) -> GroupProjectRecord:
    project = storage.get_group_project(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Group project not found")
    return project


def create_project(storage: Storage, data: GroupProjectCreate, current_user: AuthClaims) -> GroupProjectRecord:
    project = storage.create_group_project(data.model_copy(update={"lead_researcher_id": current_user.user_id}))
    logger.info("[project] %s created project %s", current_user.email, project.id)
    return project


def join_project(
    storage: Storage, project_id: str, request: ProjectJoinRequest, current_user: AuthClaims
) -> GroupProjectParticipantRecord:
    project = _get_project_or_404(storage, project_id)
    if project.status != "recruiting":
        raise HTTPException(status_code=400, detail="Project is not recruiting participants")

    participants = storage.get_group_project_participants(project_id)
    if any(p.user_id == current_user.user_id for p in participants):
        raise HTTPException(status_code=400, detail="Already a participant in this project")
    if project.current_participants >= project.max_participants:
        raise HTTPException(status_code=400, detail="Project is full")

    participant = storage.join_group_project(
        GroupProjectParticipantCreate(
            project_id=project_id,
            user_id=current_user.user_id,
            role=request.role,
            contribution_type=request.contribution_type,
        )
    )
    logger.info("[project] %s joined project %s as %s", current_user.email, project_id, participant.role)
    return participant


def list_participants(storage: Storage, project_id: str) -> list[GroupProjectParticipantRecord]:
    _get_project_or_404(storage, project_id)
    return storage.get_group_project_participants(project_id)


def update_project(storage: Storage, project_id: str, updates: GroupProjectUpdate) -> GroupProjectRecord:
    project = storage.update_group_project(project_id, updates)
    if not project:
        raise HTTPException(status_code=404, detail="Group project not found")
    return project


def delete_project(storage: Storage, project_id: str) -> None:
    if not storage.delete_group_project(project_id):
        raise HTTPException(status_code=404, detail="Group project not found")
    logger.info("[project] deleted project %s", project_id)
