import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.category import Category
from app.models.project import Project
from app.models.user import User, RoleName
from app.models.vehicle_brand import VehicleBrand
from app.utils.json_fields import dump_json_list
from app.utils.security import hash_password, issue_session_token


ADMIN_EMAIL    = "admin@steelsolution.pl"
ADMIN_PASSWORD = "admin12345"


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory, tmp_path, monkeypatch):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "uploads"))
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def admin_user(db):
    user = User(email=ADMIN_EMAIL, password=hash_password(ADMIN_PASSWORD),
                name="Administrator", role=RoleName.ADMIN)
    db.add(user)
    db.commit()
    return user


@pytest.fixture()
def auth_headers(admin_user):
    token, _ = issue_session_token(admin_user.id, admin_user.email, admin_user.role.value)
    return {"Authorization": f"Bearer {token}"}


# ─── Factories ────────────────────────────────────────────────────────────────
@pytest.fixture()
def make_brand(db):
    def _make(slug: str, name: str | None = None, **fields) -> VehicleBrand:
        brand = VehicleBrand(slug=slug, name=name or slug.upper(), **fields)
        db.add(brand)
        db.commit()
        return brand
    return _make


@pytest.fixture()
def make_category(db):
    def _make(slug: str, name: str | None = None, **fields) -> Category:
        category = Category(slug=slug, name=name or slug.replace("-", " ").title(), **fields)
        db.add(category)
        db.commit()
        return category
    return _make


@pytest.fixture()
def make_project(db, admin_user):
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _make(slug: str, age: int = 0, **fields) -> Project:
        """``age`` counts minutes after a fixed epoch, so a larger age is newer."""
        fields.setdefault("published", True)
        fields.setdefault("images", dump_json_list([]))
        project = Project(slug=slug, title=slug.replace("-", " ").title(), authorId=admin_user.id,
                          createdAt=base + timedelta(minutes=age), **fields)
        db.add(project)
        db.commit()
        return project
    return _make


@pytest.fixture()
def admin_credentials(admin_user):
    return {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
