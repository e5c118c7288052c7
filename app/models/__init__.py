"""
Import all models here so that:
1. Alembic can auto-detect them when generating migrations
2. Relationships between models resolve correctly

Order matters: import parent tables before child tables.
"""

from app.models.user import User, RoleName
from app.models.vehicle_brand import VehicleBrand
from app.models.category import Category
from app.models.category_vehicle_brand import CategoryVehicleBrand
from app.models.project import Project
from app.models.contact_message import ContactMessage
from app.models.setting import Setting

__all__ = [
    "User",
    "RoleName",
    "VehicleBrand",
    "Category",
    "CategoryVehicleBrand",
    "Project",
    "ContactMessage",
    "Setting",
]
