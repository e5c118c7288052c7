"""
Category <-> vehicle brand association bookkeeping.

The admin forms always submit the complete set of linked ids, so a sync drops
every link the owning entity has and recreates one row per submitted id.
Nothing here commits: the caller's single commit covers the primary write and
the link rewrite together, so readers never see an entity with its old links
gone and its new links missing.
"""
import logging

from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.category_vehicle_brand import CategoryVehicleBrand
from app.models.vehicle_brand import VehicleBrand
from app.utils.exceptions import NotFoundException

logger = logging.getLogger(__name__)


def _distinct(ids) -> list[str]:
    result: list[str] = []
    for i in ids or []:
        if i not in result:
            result.append(i)
    return result


def _check_exist(db: Session, model, ids: list[str], label: str) -> None:
    if not ids:
        return
    found = {row.id for row in db.query(model.id).filter(model.id.in_(ids)).all()}
    missing = [i for i in ids if i not in found]
    if missing:
        raise NotFoundException(f"{label} {', '.join(missing)}")


def sync_category_brands(db: Session, category_id: str, brand_ids) -> list[str]:
    """Replace every brand link of a category with ``brand_ids``."""
    brand_ids = _distinct(brand_ids)
    _check_exist(db, VehicleBrand, brand_ids, "Vehicle brand")

    db.query(CategoryVehicleBrand)\
      .filter(CategoryVehicleBrand.categoryId == category_id)\
      .delete(synchronize_session="fetch")
    for brand_id in brand_ids:
        db.add(CategoryVehicleBrand(categoryId=category_id, vehicleBrandId=brand_id))
    db.flush()

    logger.info(f"Category {category_id} linked to {len(brand_ids)} brand(s)")
    return brand_ids


def sync_brand_categories(db: Session, brand_id: str, category_ids) -> list[str]:
    """Replace every category link of a brand with ``category_ids``."""
    category_ids = _distinct(category_ids)
    _check_exist(db, Category, category_ids, "Category")

    db.query(CategoryVehicleBrand)\
      .filter(CategoryVehicleBrand.vehicleBrandId == brand_id)\
      .delete(synchronize_session="fetch")
    for category_id in category_ids:
        db.add(CategoryVehicleBrand(categoryId=category_id, vehicleBrandId=brand_id))
    db.flush()

    logger.info(f"Vehicle brand {brand_id} linked to {len(category_ids)} category(ies)")
    return category_ids


def linked_categories(db: Session, brand_id: str) -> list[Category]:
    return db.query(Category)\
             .join(CategoryVehicleBrand, CategoryVehicleBrand.categoryId == Category.id)\
             .filter(CategoryVehicleBrand.vehicleBrandId == brand_id)\
             .order_by(Category.sortOrder, Category.name)\
             .all()


def linked_brands(db: Session, category_id: str) -> list[VehicleBrand]:
    return db.query(VehicleBrand)\
             .join(CategoryVehicleBrand, CategoryVehicleBrand.vehicleBrandId == VehicleBrand.id)\
             .filter(CategoryVehicleBrand.categoryId == category_id)\
             .order_by(VehicleBrand.sortOrder, VehicleBrand.name)\
             .all()
