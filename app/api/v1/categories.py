from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.catalog import CategoryWriteRequest
from app.schemas.common import success_response
from app.services.category_service import category_service

router = APIRouter(prefix="/admin/categories")


@router.get("", summary="List categories with linked vehicle brands")
def list_categories(db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    return success_response("Categories retrieved", category_service.list_categories(db))


@router.get("/{category_id}", summary="Get category by ID")
def get_category(category_id: str, db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    return success_response("Category retrieved", category_service.get_category(db, category_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create category")
def create_category(
    body: CategoryWriteRequest,
    db:   Session = Depends(get_db),
    _:    User    = Depends(get_current_user),
):
    data = category_service.create_category(db, body)
    return success_response("Category created successfully", data)


@router.put("/{category_id}", summary="Replace category and its vehicle brand links")
def update_category(
    category_id: str,
    body:        CategoryWriteRequest,
    db:          Session = Depends(get_db),
    _:           User    = Depends(get_current_user),
):
    data = category_service.update_category(db, category_id, body)
    return success_response("Category updated successfully", data)


@router.delete("/{category_id}", summary="Delete category (refused while it has projects)")
def delete_category(
    category_id: str,
    db:          Session = Depends(get_db),
    _:           User    = Depends(get_current_user),
):
    category_service.delete_category(db, category_id)
    return success_response("Category deleted successfully", None)
