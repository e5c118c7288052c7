from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.common import success_response
from app.services.dashboard_service import get_dashboard

router = APIRouter(prefix="/admin")


@router.get("/dashboard", summary="Counts and recent activity for the admin home page")
def dashboard(db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    return success_response("Dashboard retrieved", get_dashboard(db))
