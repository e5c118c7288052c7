from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.auth import LoginRequest, ChangePasswordRequest, LoginResponse, UserInToken
from app.schemas.common import SuccessResponse, success_response
from app.services.auth_service import auth_service, serialize_user

router = APIRouter(prefix="/auth")


@router.post("/login", summary="Sign in to the back office", response_model=SuccessResponse[LoginResponse])
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """Send the returned accessToken as `Authorization: Bearer <token>` on /admin routes and /upload."""
    return success_response("Login successful", auth_service.login(db, data))


@router.get("/me", summary="Currently signed-in admin", response_model=SuccessResponse[UserInToken])
def me(current_user: User = Depends(get_current_user)):
    return success_response("User profile retrieved", serialize_user(current_user))


@router.patch("/change-password", summary="Change own password", response_model=SuccessResponse)
def change_password(
    data:         ChangePasswordRequest,
    db:           Session = Depends(get_db),
    current_user: User    = Depends(get_current_user),
):
    auth_service.change_password(db, data, current_user)
    return success_response("Password changed successfully.", None)
