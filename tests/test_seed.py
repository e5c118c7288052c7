from app.config import settings
from app.models.category import Category
from app.models.category_vehicle_brand import CategoryVehicleBrand
from app.models.project import Project
from app.models.setting import Setting
from app.models.user import User
from app.models.vehicle_brand import VehicleBrand
from app.seed import CATEGORIES, PROJECTS, VEHICLE_BRANDS, run
from app.services.catalog_service import catalog_service
from app.utils.security import hash_password, verify_password


def _counts(db) -> dict:
    return {
        "users":      db.query(User).count(),
        "brands":     db.query(VehicleBrand).count(),
        "categories": db.query(Category).count(),
        "links":      db.query(CategoryVehicleBrand).count(),
        "projects":   db.query(Project).count(),
        "settings":   db.query(Setting).count(),
    }


def test_seed_populates_catalog(db):
    run(db)

    counts = _counts(db)
    assert counts["users"] == 1
    assert counts["brands"] == len(VEHICLE_BRANDS)
    assert counts["categories"] == len(CATEGORIES)
    assert counts["links"] == sum(len(c["vehicleSlugs"]) for c in CATEGORIES)
    assert counts["projects"] == len(PROJECTS)
    assert counts["settings"] == 5


def test_seed_is_idempotent(db):
    run(db)
    first = _counts(db)

    run(db)

    assert _counts(db) == first


def test_seeded_man_page(db):
    run(db)

    data = catalog_service.get_brand_view(db, "man")

    slugs = {c["slug"] for c in data["categories"]}
    assert {"wozy-strazackie", "polki-do-kabin"} <= slugs
    assert [p["slug"] for p in data["projects"]] == ["man-tgm-osp-wieliczka"]


def test_reseeding_keeps_changed_admin_password(db):
    run(db)
    admin = db.query(User).filter(User.email == settings.SEED_ADMIN_EMAIL).one()
    admin.password = hash_password("changed-in-production")
    db.commit()

    run(db)

    db.refresh(admin)
    assert verify_password("changed-in-production", admin.password)
    assert not verify_password(settings.SEED_ADMIN_PASSWORD, admin.password)
    assert db.query(User).count() == 1
