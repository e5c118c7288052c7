from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.utils.security import read_session_token
from app.utils.exceptions import UnauthorizedException

bearer_scheme = HTTPBearer(
    auto_error=False,
    description="Admin session token returned by POST /api/auth/login",
)


# ─── Back-office guard ────────────────────────────────────────────────────────
def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the signed-in admin from the bearer token.
    Every /admin route and the upload endpoint depend on this, so an anonymous
    caller gets a 401 before any handler code runs.
    """
    if credentials is None:
        raise UnauthorizedException("Sign in to access the back office")

    claims = read_session_token(credentials.credentials)

    user = db.get(User, claims["sub"])
    if user is None:
        raise UnauthorizedException("Account no longer exists")
    return user
