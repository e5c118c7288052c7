import logging

from sqlalchemy.orm import Session

from app.models.user import User, RoleName
from app.schemas.auth import LoginRequest, ChangePasswordRequest
from app.utils.exceptions import UnauthorizedException
from app.utils.security import verify_password, verify_and_rehash, hash_password, issue_session_token

logger = logging.getLogger(__name__)


def serialize_user(user: User) -> dict:
    return {
        "id":    user.id,
        "email": user.email,
        "name":  user.name,
        "role":  user.role.value,
    }


class AuthService:

    # ─── Login ────────────────────────────────────────────────────────────────
    def login(self, db: Session, data: LoginRequest) -> dict:
        user = db.query(User).filter(User.email == str(data.email)).first()

        # same message for unknown email and wrong password
        valid, new_hash = verify_and_rehash(data.password, user.password) if user else (False, None)
        if not valid:
            logger.info(f"Failed login for {data.email}")
            raise UnauthorizedException("Invalid email or password")

        if new_hash:
            user.password = new_hash
            db.commit()

        token, lifetime = issue_session_token(user.id, user.email, user.role.value)
        logger.info(f"{user.email} signed in")

        return {
            "accessToken": token,
            "tokenType":   "Bearer",
            "expiresIn":   lifetime,
            "user":        serialize_user(user),
        }

    # ─── Change Password ──────────────────────────────────────────────────────
    def change_password(self, db: Session, data: ChangePasswordRequest, current_user: User) -> None:
        if not verify_password(data.currentPassword, current_user.password):
            raise UnauthorizedException("Current password is incorrect")

        current_user.password = hash_password(data.newPassword)
        db.commit()
        logger.info(f"{current_user.email} changed their password")

    # ─── Bootstrap ────────────────────────────────────────────────────────────
    def ensure_admin(self, db: Session, email: str, password: str, name: str = "Administrator") -> User:
        """Create the admin account if it is missing. An existing account is returned untouched."""
        user = db.query(User).filter(User.email == email).first()
        if user:
            return user

        user = User(email=email, password=hash_password(password), name=name, role=RoleName.ADMIN)
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info(f"Created admin account {email}")
        return user


auth_service = AuthService()
