from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # ─── Application ───────────────────────────────────────────────────────────
    APP_NAME: str = "Steel Solution"
    APP_ENV:  str = "development"
    APP_DEBUG: bool = True
    APP_HOST:  str = "0.0.0.0"
    APP_PORT:  int = 8000

    # ─── Database ──────────────────────────────────────────────────────────────
    DATABASE_URL:          str  = "sqlite:///./local.db"
    DATABASE_POOL_SIZE:    int  = 10
    DATABASE_MAX_OVERFLOW: int  = 20
    DATABASE_POOL_TIMEOUT: int  = 30
    DATABASE_ECHO:         bool = False

    # ─── JWT ───────────────────────────────────────────────────────────────────
    SECRET_KEY:                  str
    ALGORITHM:                   str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 8

    # ─── Uploads ───────────────────────────────────────────────────────────────
    UPLOAD_DIR:         str = "public/uploads"
    UPLOAD_URL_PREFIX:  str = "/uploads"
    UPLOAD_MAX_BYTES:   int = 5 * 1024 * 1024
    UPLOAD_ALLOWED_TYPES: str = "image/jpeg,image/png,image/webp,image/gif"

    # ─── Seed ──────────────────────────────────────────────────────────────────
    SEED_ADMIN_EMAIL:    str = "admin@steelsolution.pl"
    SEED_ADMIN_PASSWORD: str = "admin123"

    # ─── CORS ──────────────────────────────────────────────────────────────────
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8000"

    @field_validator("DATABASE_URL")
    @classmethod
    def normalize_db_scheme(cls, v: str) -> str:
        # Heroku-style URLs use the scheme SQLAlchemy 2 no longer accepts
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    def get_cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    def get_upload_types(self) -> List[str]:
        return [t.strip() for t in self.UPLOAD_ALLOWED_TYPES.split(",") if t.strip()]

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


settings = Settings()
