"""Group research projects API router."""

from typing import List

from fastapi import APIRouter, Depends

from gireach.middleware.auth_middleware import get_current_user, require_roles
from gireach.schemas.common import MessageOut
from gireach.schemas.project import (
    GroupProjectCreate,
    GroupProjectParticipantRecord,
    GroupProjectRecord,
    GroupProjectUpdate,
    ProjectJoinRequest,
)
from gireach.schemas.user import AuthClaims
from gireach.services import project_service
from gireach.storage import Storage, get_storage
from gireach.utils.permissions import ADMIN, ADMIN_MENTOR

router = APIRouter(tags=["projects"])


@router.get("/api/projects", response_model=List[GroupProjectRecord])
def list_active_projects(storage: Storage = Depends(get_storage)):
    return storage.get_active_group_projects()


@router.post("/api/projects", response_model=GroupProjectRecord, status_code=201)
def create_project(
    data: GroupProjectCreate,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(require_roles(*ADMIN_MENTOR)),
):
    return project_service.create_project(storage, data, current_user)


@router.post("/api/projects/{project_id}/join", response_model=GroupProjectParticipantRecord, status_code=201)
def join_project(
    project_id: str,
    request: ProjectJoinRequest | None = None,
    storage: Storage = Depends(get_storage),
    current_user: AuthClaims = Depends(get_current_user),
):
    return project_service.join_project(storage, project_id, request or ProjectJoinRequest(), current_user)


@router.get("/api/projects/{project_id}/participants", response_model=List[GroupProjectParticipantRecord])
def list_participants(project_id: str, storage: Storage = Depends(get_storage)):
    return project_service.list_participants(storage, project_id)


@router.get("/api/admin/projects", response_model=List[GroupProjectRecord])
def list_all_projects(
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return storage.get_group_projects()


@router.put("/api/admin/projects/{project_id}", response_model=GroupProjectRecord)
def update_project(
    project_id: str,
    updates: GroupProjectUpdate,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    return project_service.update_project(storage, project_id, updates)


@router.delete("/api/admin/projects/{project_id}", response_model=MessageOut)
def delete_project(
    project_id: str,
    storage: Storage = Depends(get_storage),
    _current_user: AuthClaims = Depends(require_roles(ADMIN)),
):
    project_service.delete_project(storage, project_id)
    return MessageOut(message="Group project deleted successfully")
