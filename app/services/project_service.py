import logging

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.project import Project
from app.models.user import User
from app.schemas.project import ProjectWriteRequest
from app.schemas.common import page_offset
from app.services.serializers import serialize_project
from app.utils.exceptions import NotFoundException, DuplicateEntryException
from app.utils.json_fields import dump_json_list

logger = logging.getLogger(__name__)


def _apply(p: Project, data: ProjectWriteRequest) -> None:
    """Overwrite every editable column (full replace). authorId is left alone."""
    p.title           = data.title
    p.slug            = data.slug
    p.description     = data.description
    p.content         = data.content
    p.categoryId      = data.categoryId
    p.vehicleBrand    = data.vehicleBrand
    p.vehicleModel    = data.vehicleModel
    p.year            = data.year
    p.images          = dump_json_list(data.images)
    p.thumbnail       = data.thumbnail
    p.metaTitle       = data.metaTitle
    p.metaDescription = data.metaDescription
    p.featured        = data.featured
    p.published       = data.published


class ProjectService:

    def _get_or_404(self, db: Session, project_id: str) -> Project:
        p = db.query(Project).filter(Project.id == project_id).first()
        if not p:
            raise NotFoundException("Project")
        return p

    def _check_slug(self, db: Session, slug: str, exclude_id: str | None = None) -> None:
        q = db.query(Project).filter(Project.slug == slug)
        if exclude_id:
            q = q.filter(Project.id != exclude_id)
        if q.first():
            raise DuplicateEntryException(f"Project with slug '{slug}' already exists", field="slug")

    def _check_category(self, db: Session, category_id: str | None) -> None:
        if category_id and not db.query(Category).filter(Category.id == category_id).first():
            raise NotFoundException("Category")

    def list_projects(
        self, db: Session, page: int, limit: int,
        search: str | None, category_id: str | None, published: bool | None,
    ) -> tuple[list[dict], int]:
        q = db.query(Project)

        if search:
            kw = f"%{search}%"
            q = q.filter(or_(
                Project.title.ilike(kw),
                Project.slug.ilike(kw),
                Project.vehicleBrand.ilike(kw),
                Project.vehicleModel.ilike(kw),
            ))
        if category_id:
            q = q.filter(Project.categoryId == category_id)
        if published is not None:
            q = q.filter(Project.published == published)

        total = q.count()
        items = q.order_by(Project.createdAt.desc()).offset(page_offset(page, limit)).limit(limit).all()
        return [serialize_project(p) for p in items], total

    def get_project(self, db: Session, project_id: str) -> dict:
        return serialize_project(self._get_or_404(db, project_id))

    def create_project(self, db: Session, data: ProjectWriteRequest, author: User) -> dict:
        self._check_slug(db, data.slug)
        self._check_category(db, data.categoryId)

        p = Project(authorId=author.id)
        _apply(p, data)
        db.add(p)
        db.commit()
        db.refresh(p)

        logger.info(f"Created project {p.slug} ({p.id}) by {author.email}")
        return serialize_project(p)

    def update_project(self, db: Session, project_id: str, data: ProjectWriteRequest) -> dict:
        p = self._get_or_404(db, project_id)
        self._check_slug(db, data.slug, exclude_id=project_id)
        self._check_category(db, data.categoryId)

        _apply(p, data)
        db.commit()
        db.refresh(p)

        logger.info(f"Updated project {p.slug} ({p.id})")
        return serialize_project(p)

    def delete_project(self, db: Session, project_id: str) -> None:
        p = self._get_or_404(db, project_id)
        slug = p.slug
        db.delete(p)
        db.commit()
        logger.info(f"Deleted project {slug} ({project_id})")


project_service = ProjectService()
