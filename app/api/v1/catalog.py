from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Literal, Optional

from app.database import get_db
from app.schemas.common import success_response
from app.services.catalog_service import catalog_service

router = APIRouter()


# ─── Landing pages ────────────────────────────────────────────────────────────
@router.get("/home", summary="[PUBLIC] Featured projects, categories and brands")
def home(db: Session = Depends(get_db)):
    return success_response("Home page data", catalog_service.get_home(db))


@router.get("/offer", summary="[PUBLIC] Offer overview: brands by type, categories")
def offer(db: Session = Depends(get_db)):
    return success_response("Offer overview", catalog_service.get_offer_overview(db))


# ─── Vehicle brands ───────────────────────────────────────────────────────────
@router.get("/brands", summary="[PUBLIC] Published vehicle brands")
def list_brands(
    type: Optional[Literal["truck", "pickup"]] = Query(None),
    db:   Session = Depends(get_db),
):
    return success_response("Vehicle brands retrieved", catalog_service.list_brands(db, type))


@router.get("/brands/{slug}", summary="[PUBLIC] Vehicle brand page")
def brand_view(slug: str, db: Session = Depends(get_db)):
    return success_response("Vehicle brand retrieved", catalog_service.get_brand_view(db, slug))


# ─── Categories ───────────────────────────────────────────────────────────────
@router.get("/categories", summary="[PUBLIC] Published product categories")
def list_categories(db: Session = Depends(get_db)):
    return success_response("Categories retrieved", catalog_service.list_categories(db))


@router.get("/categories/{slug}", summary="[PUBLIC] Product category page")
def category_view(slug: str, db: Session = Depends(get_db)):
    return success_response("Category retrieved", catalog_service.get_category_view(db, slug))


# ─── Projects ─────────────────────────────────────────────────────────────────
@router.get("/projects", summary="[PUBLIC] Published projects, newest first")
def list_projects(
    category: Optional[str] = Query(None, description="Category slug"),
    db:       Session       = Depends(get_db),
):
    return success_response("Projects retrieved", catalog_service.list_projects(db, category))


@router.get("/projects/{slug}", summary="[PUBLIC] Project page with related projects")
def project_view(slug: str, db: Session = Depends(get_db)):
    return success_response("Project retrieved", catalog_service.get_project_view(db, slug))
