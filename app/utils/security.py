"""
Admin credentials: bcrypt password hashes and the signed bearer token that
stands in for a back-office session.
"""
from datetime import datetime, timedelta, timezone

from jose import JWTError, ExpiredSignatureError, jwt
from passlib.context import CryptContext

from app.config import settings
from app.utils.exceptions import TokenExpiredException, UnauthorizedException

SESSION_TOKEN_TYPE = "admin_session"

# ─── Passwords ────────────────────────────────────────────────────────────────
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def verify_and_rehash(plain_password: str, hashed_password: str) -> tuple[bool, str | None]:
    """
    Like verify_password, but also returns a fresh hash when the stored one
    was made with settings the context now considers deprecated (else None).
    """
    return pwd_context.verify_and_update(plain_password, hashed_password)


# ─── Session token ────────────────────────────────────────────────────────────
def issue_session_token(user_id: str, email: str, role: str) -> tuple[str, int]:
    """Sign a back-office session token. Returns (token, lifetime in seconds)."""
    lifetime = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    now = datetime.now(timezone.utc)
    claims = {
        "sub":   user_id,
        "email": email,
        "role":  role,
        "typ":   SESSION_TOKEN_TYPE,
        "iat":   now,
        "exp":   now + timedelta(seconds=lifetime),
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM), lifetime


def read_session_token(token: str) -> dict:
    """Decode a session token, raising 401 for anything that is not a live admin session."""
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpiredException()
    except JWTError:
        raise UnauthorizedException("Invalid or malformed token")

    if claims.get("typ") != SESSION_TOKEN_TYPE or not claims.get("sub"):
        raise UnauthorizedException("Not an admin session token")
    return claims
