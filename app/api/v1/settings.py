from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.setting import SettingUpdate, SettingOut
from app.schemas.common import SuccessResponse, success_response
from app.services.setting_service import setting_service

router = APIRouter()


@router.get("/settings", summary="[PUBLIC] Site settings as a key/value map")
def public_settings(db: Session = Depends(get_db)):
    return success_response("Settings retrieved", setting_service.get_public_settings(db))


@router.get("/admin/settings", summary="List all settings", response_model=SuccessResponse[list[SettingOut]])
def list_settings(
    db: Session = Depends(get_db),
    _:  User    = Depends(get_current_user),
):
    return success_response("Settings retrieved", setting_service.list_settings(db))


@router.get("/admin/settings/{key}", summary="Get one setting", response_model=SuccessResponse[SettingOut])
def get_setting(
    key: str     = Path(..., min_length=1, max_length=100),
    db:  Session = Depends(get_db),
    _:   User    = Depends(get_current_user),
):
    return success_response("Setting retrieved", setting_service.get_setting(db, key))


@router.put("/admin/settings/{key}", summary="Create or update a setting", response_model=SuccessResponse[SettingOut])
def upsert_setting(
    body: SettingUpdate,
    key:  str     = Path(..., min_length=1, max_length=100),
    db:   Session = Depends(get_db),
    _:    User    = Depends(get_current_user),
):
    return success_response("Setting updated", setting_service.upsert_setting(db, key, body.value))
