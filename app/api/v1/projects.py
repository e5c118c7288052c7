from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.project import ProjectWriteRequest
from app.schemas.common import PaginatedResponse, success_response, paginated_response
from app.services.project_service import project_service

router = APIRouter(prefix="/admin/projects")


@router.get("", summary="List projects (paginated)", response_model=PaginatedResponse)
def list_projects(
    page:       int            = Query(1, ge=1),
    limit:      int            = Query(20, ge=1, le=100),
    search:     Optional[str]  = Query(None),
    categoryId: Optional[str]  = Query(None),
    published:  Optional[bool] = Query(None),
    db:         Session        = Depends(get_db),
    _:          User           = Depends(get_current_user),
):
    data, total = project_service.list_projects(db, page, limit, search, categoryId, published)
    return paginated_response("Projects retrieved successfully", data, total, page, limit)


@router.get("/{project_id}", summary="Get project by ID")
def get_project(project_id: str, db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    return success_response("Project retrieved", project_service.get_project(db, project_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create project")
def create_project(
    body: ProjectWriteRequest,
    db:   Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    data = project_service.create_project(db, body, current_user)
    return success_response("Project created successfully", data)


@router.put("/{project_id}", summary="Replace project")
def update_project(
    project_id: str,
    body:       ProjectWriteRequest,
    db:         Session = Depends(get_db),
    _:          User    = Depends(get_current_user),
):
    data = project_service.update_project(db, project_id, body)
    return success_response("Project updated successfully", data)


@router.delete("/{project_id}", summary="Delete project")
def delete_project(
    project_id: str,
    db:         Session = Depends(get_db),
    _:          User    = Depends(get_current_user),
):
    project_service.delete_project(db, project_id)
    return success_response("Project deleted successfully", None)
