import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError

from app.config import settings
from app.database import check_db_connection, dispose_engine
from app.utils.exceptions import AppException
from app.middleware.error_handler import (
    app_exception_handler,
    validation_exception_handler,
    integrity_error_handler,
    generic_exception_handler,
)

from app.api.v1 import auth
from app.api.v1 import vehicle_brands
from app.api.v1 import categories
from app.api.v1 import projects
from app.api.v1 import messages
from app.api.v1 import settings as site_settings
from app.api.v1 import dashboard
from app.api.v1 import uploads
from app.api.v1 import catalog

logging.basicConfig(
    level=logging.DEBUG if settings.APP_DEBUG else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    ok = check_db_connection()
    logger.info("DB connected" if ok else "DB connection FAILED")
    yield
    dispose_engine()
    logger.info("DB engine disposed")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=VERSION,
        description="Vehicle outfitting catalog: public offer pages and admin back-office API",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ─── CORS ─────────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ─── Exception Handlers ───────────────────────────────────────────────────
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ─── Routers ──────────────────────────────────────────────────────────────
    PREFIX = "/api"
    app.include_router(auth.router,           prefix=PREFIX, tags=["Auth"])
    app.include_router(catalog.router,        prefix=PREFIX, tags=["Catalog"])
    app.include_router(messages.router,       prefix=PREFIX, tags=["Contact"])
    app.include_router(site_settings.router,  prefix=PREFIX, tags=["Settings"])
    app.include_router(vehicle_brands.router, prefix=PREFIX, tags=["Admin: Vehicle Brands"])
    app.include_router(categories.router,     prefix=PREFIX, tags=["Admin: Categories"])
    app.include_router(projects.router,       prefix=PREFIX, tags=["Admin: Projects"])
    app.include_router(dashboard.router,      prefix=PREFIX, tags=["Admin: Dashboard"])
    app.include_router(uploads.router,        prefix=PREFIX, tags=["Uploads"])

    # ─── Uploaded media ───────────────────────────────────────────────────────
    app.mount(
        settings.UPLOAD_URL_PREFIX,
        StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False),
        name="uploads",
    )

    # ─── Health ───────────────────────────────────────────────────────────────
    @app.get("/health", tags=["Health"])
    def health():
        db_ok = check_db_connection()
        return {
            "status":   "ok" if db_ok else "degraded",
            "database": "ok" if db_ok else "unavailable",
            "app":      settings.APP_NAME,
            "version":  VERSION,
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.APP_HOST, port=settings.APP_PORT,
                reload=settings.is_development)
