import logging

from sqlalchemy.orm import Session

from app.models.vehicle_brand import VehicleBrand
from app.schemas.catalog import VehicleBrandWriteRequest
from app.services.catalog_links import sync_brand_categories, linked_categories
from app.services.serializers import serialize_brand
from app.utils.exceptions import NotFoundException, DuplicateEntryException
from app.utils.json_fields import dump_json_list

logger = logging.getLogger(__name__)


def _apply(b: VehicleBrand, data: VehicleBrandWriteRequest) -> None:
    """Overwrite every editable column (full replace)."""
    b.name               = data.name
    b.slug               = data.slug
    b.fullName           = data.fullName
    b.description        = data.description
    b.longDescription    = data.longDescription
    b.contentDescription = data.contentDescription
    b.type               = data.type
    b.models             = dump_json_list([m.model_dump() for m in data.models])
    b.image              = data.image
    b.heroImage          = data.heroImage
    b.gallery            = dump_json_list(data.gallery)
    b.metaTitle          = data.metaTitle
    b.metaDescription    = data.metaDescription
    b.sortOrder          = data.sortOrder
    b.published          = data.published


class VehicleBrandService:

    def _get_or_404(self, db: Session, brand_id: str) -> VehicleBrand:
        b = db.query(VehicleBrand).filter(VehicleBrand.id == brand_id).first()
        if not b:
            raise NotFoundException("Vehicle brand")
        return b

    def _check_slug(self, db: Session, slug: str, exclude_id: str | None = None) -> None:
        q = db.query(VehicleBrand).filter(VehicleBrand.slug == slug)
        if exclude_id:
            q = q.filter(VehicleBrand.id != exclude_id)
        if q.first():
            raise DuplicateEntryException(f"Vehicle brand with slug '{slug}' already exists", field="slug")

    def list_brands(self, db: Session) -> list[dict]:
        brands = db.query(VehicleBrand).order_by(VehicleBrand.sortOrder, VehicleBrand.name).all()
        return [serialize_brand(b, linked_categories(db, b.id)) for b in brands]

    def get_brand(self, db: Session, brand_id: str) -> dict:
        b = self._get_or_404(db, brand_id)
        return serialize_brand(b, linked_categories(db, b.id))

    def create_brand(self, db: Session, data: VehicleBrandWriteRequest) -> dict:
        self._check_slug(db, data.slug)

        b = VehicleBrand()
        _apply(b, data)
        db.add(b)
        db.flush()
        sync_brand_categories(db, b.id, data.categoryIds)
        db.commit()
        db.refresh(b)

        logger.info(f"Created vehicle brand {b.slug} ({b.id})")
        return serialize_brand(b, linked_categories(db, b.id))

    def update_brand(self, db: Session, brand_id: str, data: VehicleBrandWriteRequest) -> dict:
        b = self._get_or_404(db, brand_id)
        self._check_slug(db, data.slug, exclude_id=brand_id)

        _apply(b, data)
        sync_brand_categories(db, b.id, data.categoryIds)
        db.commit()
        db.refresh(b)

        logger.info(f"Updated vehicle brand {b.slug} ({b.id})")
        return serialize_brand(b, linked_categories(db, b.id))

    def delete_brand(self, db: Session, brand_id: str) -> None:
        b = self._get_or_404(db, brand_id)
        slug = b.slug
        # category links go with it (ORM cascade + ON DELETE CASCADE)
        db.delete(b)
        db.commit()
        logger.info(f"Deleted vehicle brand {slug} ({brand_id})")


vehicle_brand_service = VehicleBrandService()
