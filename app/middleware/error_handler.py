"""
Exception handlers registered in app/main.py.

Every failure leaves the API in the same envelope:
    {"success": false, "message": ..., "error": {"code", "details", "field"}}
"""
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from app.utils.exceptions import AppException, ErrorCode

logger = logging.getLogger(__name__)

# Parts of a pydantic error location that say where, not which field
_LOCATION_PARTS = {"body", "query", "path", "header", "cookie"}


def _envelope(message: str, code: str, details: list | None = None, field: str | None = None) -> dict:
    return {
        "success": False,
        "message": message,
        "error":   {"code": code, "details": details, "field": field},
    }


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.body(), headers=exc.headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Flatten pydantic errors into one {field, message} entry per problem (422)."""
    details = []
    for error in exc.errors():
        parts = [str(p) for p in error.get("loc", ()) if p not in _LOCATION_PARTS]
        details.append({
            "field":   ".".join(parts) or "body",
            "message": error.get("msg", "Invalid value"),
        })

    first = details[0] if len(details) == 1 else None
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_envelope(
            first["message"] if first else "Validation error. Please check your input.",
            ErrorCode.VALIDATION_ERROR,
            details=details,
            field=first["field"] if first else None,
        ),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """
    A unique constraint tripped after the service-level slug check passed,
    e.g. two admins saving the same slug at once. The loser gets a 409.
    """
    logger.warning(f"IntegrityError on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content=_envelope("Another record already uses this value.", ErrorCode.DUPLICATE_ENTRY),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope("An unexpected error occurred. Please try again later.",
                          ErrorCode.INTERNAL_SERVER_ERROR),
    )
