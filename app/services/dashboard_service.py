from sqlalchemy.orm import Session

from app.models.category import Category
from app.models.contact_message import ContactMessage
from app.models.project import Project
from app.models.vehicle_brand import VehicleBrand
from app.services.contact_service import contact_service
from app.services.serializers import serialize_project, serialize_message

RECENT_ITEMS = 5


def get_dashboard(db: Session) -> dict:
    recent_projects = db.query(Project).order_by(Project.createdAt.desc()).limit(RECENT_ITEMS).all()
    recent_messages = db.query(ContactMessage).order_by(ContactMessage.createdAt.desc()).limit(RECENT_ITEMS).all()
    return {
        "stats": {
            "projects":       db.query(Project).count(),
            "categories":     db.query(Category).count(),
            "vehicleBrands":  db.query(VehicleBrand).count(),
            "unreadMessages": contact_service.unread_count(db),
        },
        "recentProjects": [serialize_project(p) for p in recent_projects],
        "recentMessages": [serialize_message(m) for m in recent_messages],
    }
