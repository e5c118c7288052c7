import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.project import Project
from app.schemas.catalog import CategoryWriteRequest
from app.services.catalog_links import sync_category_brands, linked_brands
from app.services.serializers import serialize_category
from app.utils.exceptions import NotFoundException, DuplicateEntryException, DeleteBlockedException
from app.utils.json_fields import dump_json_list

logger = logging.getLogger(__name__)


def _apply(c: Category, data: CategoryWriteRequest) -> None:
    """Overwrite every editable column (full replace)."""
    c.name               = data.name
    c.slug               = data.slug
    c.description        = data.description
    c.longDescription    = data.longDescription
    c.contentDescription = data.contentDescription
    c.icon               = data.icon
    c.color              = data.color
    c.features           = dump_json_list(data.features)
    c.benefits           = dump_json_list(data.benefits)
    c.specifications     = dump_json_list([s.model_dump() for s in data.specifications])
    c.image              = data.image
    c.heroImage          = data.heroImage
    c.gallery            = dump_json_list(data.gallery)
    c.metaTitle          = data.metaTitle
    c.metaDescription    = data.metaDescription
    c.sortOrder          = data.sortOrder
    c.published          = data.published


class CategoryService:

    def _get_or_404(self, db: Session, category_id: str) -> Category:
        c = db.query(Category).filter(Category.id == category_id).first()
        if not c:
            raise NotFoundException("Category")
        return c

    def _check_slug(self, db: Session, slug: str, exclude_id: str | None = None) -> None:
        q = db.query(Category).filter(Category.slug == slug)
        if exclude_id:
            q = q.filter(Category.id != exclude_id)
        if q.first():
            raise DuplicateEntryException(f"Category with slug '{slug}' already exists", field="slug")

    def project_count(self, db: Session, category_id: str) -> int:
        return db.query(func.count(Project.id)).filter(Project.categoryId == category_id).scalar() or 0

    def list_categories(self, db: Session) -> list[dict]:
        cats = db.query(Category).order_by(Category.sortOrder, Category.name).all()
        return [serialize_category(c, linked_brands(db, c.id)) for c in cats]

    def get_category(self, db: Session, category_id: str) -> dict:
        c = self._get_or_404(db, category_id)
        return serialize_category(c, linked_brands(db, c.id))

    def create_category(self, db: Session, data: CategoryWriteRequest) -> dict:
        self._check_slug(db, data.slug)

        c = Category()
        _apply(c, data)
        db.add(c)
        db.flush()
        sync_category_brands(db, c.id, data.vehicleBrandIds)
        db.commit()
        db.refresh(c)

        logger.info(f"Created category {c.slug} ({c.id})")
        return serialize_category(c, linked_brands(db, c.id))

    def update_category(self, db: Session, category_id: str, data: CategoryWriteRequest) -> dict:
        c = self._get_or_404(db, category_id)
        self._check_slug(db, data.slug, exclude_id=category_id)

        _apply(c, data)
        sync_category_brands(db, c.id, data.vehicleBrandIds)
        db.commit()
        db.refresh(c)

        logger.info(f"Updated category {c.slug} ({c.id})")
        return serialize_category(c, linked_brands(db, c.id))

    def delete_category(self, db: Session, category_id: str) -> None:
        c = self._get_or_404(db, category_id)

        count = self.project_count(db, category_id)
        if count > 0:
            raise DeleteBlockedException(
                f"Cannot delete category '{c.slug}': it has {count} project(s)"
            )

        slug = c.slug
        db.delete(c)
        db.commit()
        logger.info(f"Deleted category {slug} ({category_id})")


category_service = CategoryService()
