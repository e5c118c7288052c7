"""
Public, read-only catalog views.

Nothing here writes. Every view tolerates an entity with no links and no
projects (empty lists, never an error).
"""
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.project import Project
from app.models.vehicle_brand import VehicleBrand
from app.services.catalog_links import linked_brands, linked_categories
from app.services.serializers import (
    serialize_brand, serialize_category, serialize_project,
    brand_summary, category_summary,
)
from app.utils.exceptions import NotFoundException

DETAIL_PROJECTS  = 6
RELATED_PROJECTS = 3
HOME_PROJECTS    = 6
HOME_CATEGORIES  = 6


def projects_for_brand(db: Session, brand_name: str, limit: int = DETAIL_PROJECTS) -> list[Project]:
    """
    Published projects whose free-text ``vehicleBrand`` contains the brand name.

    Projects carry the brand only as a label, so this is a substring match, not
    a join. LIKE narrows the candidates; the containment test is repeated in
    Python because LIKE is case-insensitive on some backends.
    """
    candidates = db.query(Project)\
                   .filter(Project.published == True,
                           Project.vehicleBrand.contains(brand_name, autoescape=True))\
                   .order_by(Project.createdAt.desc())\
                   .all()
    return [p for p in candidates if brand_name in (p.vehicleBrand or "")][:limit]


def projects_for_category(db: Session, category_id: str, limit: int = DETAIL_PROJECTS) -> list[Project]:
    return db.query(Project)\
             .filter(Project.published == True, Project.categoryId == category_id)\
             .order_by(Project.createdAt.desc())\
             .limit(limit)\
             .all()


class CatalogService:

    # ─── Detail views ─────────────────────────────────────────────────────────
    def get_brand_view(self, db: Session, slug: str) -> dict:
        brand = db.query(VehicleBrand).filter(VehicleBrand.slug == slug).first()
        if not brand:
            raise NotFoundException("Vehicle brand")

        # linked categories are returned whatever their published flag
        data = serialize_brand(brand, linked_categories(db, brand.id))
        data["projects"] = [serialize_project(p) for p in projects_for_brand(db, brand.name)]
        return data

    def get_category_view(self, db: Session, slug: str) -> dict:
        category = db.query(Category).filter(Category.slug == slug).first()
        if not category:
            raise NotFoundException("Category")

        data = serialize_category(category, linked_brands(db, category.id))
        data["projects"] = [serialize_project(p) for p in projects_for_category(db, category.id)]
        return data

    def get_project_view(self, db: Session, slug: str) -> dict:
        project = db.query(Project)\
                    .filter(Project.slug == slug, Project.published == True)\
                    .first()
        if not project:
            raise NotFoundException("Project")

        related = []
        if project.categoryId:
            related = db.query(Project)\
                        .filter(Project.categoryId == project.categoryId,
                                Project.published == True,
                                Project.id != project.id)\
                        .order_by(Project.createdAt.desc())\
                        .limit(RELATED_PROJECTS)\
                        .all()

        data = serialize_project(project)
        data["related"] = [serialize_project(p) for p in related]
        return data

    # ─── Listings ─────────────────────────────────────────────────────────────
    def list_brands(self, db: Session, brand_type: str | None = None) -> list[dict]:
        q = db.query(VehicleBrand).filter(VehicleBrand.published == True)
        if brand_type:
            q = q.filter(VehicleBrand.type == brand_type)
        brands = q.order_by(VehicleBrand.sortOrder, VehicleBrand.name).all()
        return [serialize_brand(b) for b in brands]

    def list_categories(self, db: Session) -> list[dict]:
        counts = dict(
            db.query(Project.categoryId, func.count(Project.id))
              .filter(Project.published == True)
              .group_by(Project.categoryId)
              .all()
        )
        cats = db.query(Category)\
                 .filter(Category.published == True)\
                 .order_by(Category.sortOrder, Category.name)\
                 .all()
        result = []
        for c in cats:
            data = serialize_category(c)
            data["projectCount"] = counts.get(c.id, 0)
            result.append(data)
        return result

    def list_projects(self, db: Session, category_slug: str | None = None) -> list[dict]:
        q = db.query(Project).filter(Project.published == True)
        if category_slug:
            q = q.join(Category, Project.categoryId == Category.id).filter(Category.slug == category_slug)
        return [serialize_project(p) for p in q.order_by(Project.createdAt.desc()).all()]

    # ─── Landing pages ────────────────────────────────────────────────────────
    def get_home(self, db: Session) -> dict:
        featured = db.query(Project)\
                     .filter(Project.published == True, Project.featured == True)\
                     .order_by(Project.createdAt.desc())\
                     .limit(HOME_PROJECTS)\
                     .all()
        categories = db.query(Category)\
                       .filter(Category.published == True)\
                       .order_by(Category.sortOrder)\
                       .limit(HOME_CATEGORIES)\
                       .all()
        brands = db.query(VehicleBrand)\
                   .filter(VehicleBrand.published == True)\
                   .order_by(VehicleBrand.sortOrder)\
                   .all()
        return {
            "featuredProjects": [serialize_project(p) for p in featured],
            "categories":       [category_summary(c) for c in categories],
            "vehicleBrands":    [brand_summary(b) for b in brands],
        }

    def get_offer_overview(self, db: Session) -> dict:
        brands = db.query(VehicleBrand)\
                   .filter(VehicleBrand.published == True)\
                   .order_by(VehicleBrand.sortOrder)\
                   .all()
        categories = db.query(Category)\
                       .filter(Category.published == True)\
                       .order_by(Category.sortOrder)\
                       .all()
        project_count = db.query(func.count(Project.id)).filter(Project.published == True).scalar() or 0
        return {
            "trucks":       [brand_summary(b) for b in brands if b.type == "truck"],
            "pickups":      [brand_summary(b) for b in brands if b.type == "pickup"],
            "categories":   [category_summary(c) for c in categories],
            "projectCount": project_count,
        }


catalog_service = CatalogService()
