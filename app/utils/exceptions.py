from fastapi import HTTPException, status


# ═══════════════════════════════════════════════════════════════════════════════
# ERROR CODES: what the admin front end switches on
# ═══════════════════════════════════════════════════════════════════════════════
class ErrorCode:
    VALIDATION_ERROR      = "VALIDATION_ERROR"
    UNAUTHORIZED          = "UNAUTHORIZED"
    TOKEN_EXPIRED         = "TOKEN_EXPIRED"
    NOT_FOUND             = "NOT_FOUND"
    DUPLICATE_ENTRY       = "DUPLICATE_ENTRY"
    DELETE_BLOCKED        = "DELETE_BLOCKED"
    INVALID_UPLOAD        = "INVALID_UPLOAD"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


# ═══════════════════════════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════════════════════════
class AppException(HTTPException):
    """
    Base for every error a service raises on purpose.

    Subclasses only pick a status, a code and a default message; the handler in
    app/middleware/error_handler.py turns any of them into the error envelope.
    """
    http_status     = status.HTTP_500_INTERNAL_SERVER_ERROR
    code            = ErrorCode.INTERNAL_SERVER_ERROR
    default_message = "An error occurred"

    def __init__(
        self,
        message: str | None = None,
        *,
        field: str | None = None,
        details: list | None = None,
        headers: dict | None = None,
    ):
        super().__init__(
            status_code=self.http_status,
            detail={
                "message": message or self.default_message,
                "error": {"code": self.code, "details": details, "field": field},
            },
            headers=headers,
        )

    @property
    def error_code(self) -> str:
        return self.detail["error"]["code"]

    @property
    def message(self) -> str:
        return self.detail["message"]

    def body(self) -> dict:
        return {"success": False, **self.detail}


# ═══════════════════════════════════════════════════════════════════════════════
# CONCRETE EXCEPTIONS
# ═══════════════════════════════════════════════════════════════════════════════

# ─── 401 ──────────────────────────────────────────────────────────────────────
class UnauthorizedException(AppException):
    http_status     = status.HTTP_401_UNAUTHORIZED
    code            = ErrorCode.UNAUTHORIZED
    default_message = "Authentication required"

    def __init__(self, message: str | None = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class TokenExpiredException(UnauthorizedException):
    code            = ErrorCode.TOKEN_EXPIRED
    default_message = "Session has expired, please sign in again"


# ─── 404 ──────────────────────────────────────────────────────────────────────
class NotFoundException(AppException):
    http_status = status.HTTP_404_NOT_FOUND
    code        = ErrorCode.NOT_FOUND

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found")


# ─── 409 ──────────────────────────────────────────────────────────────────────
class DuplicateEntryException(AppException):
    """Slug (or other unique key) already taken by another row."""
    http_status     = status.HTTP_409_CONFLICT
    code            = ErrorCode.DUPLICATE_ENTRY
    default_message = "Record already exists"

    def __init__(self, message: str | None = None, field: str | None = None):
        super().__init__(message, field=field)


class DeleteBlockedException(AppException):
    """Row is still referenced and must not be removed."""
    http_status = status.HTTP_409_CONFLICT
    code        = ErrorCode.DELETE_BLOCKED


# ─── 400 ──────────────────────────────────────────────────────────────────────
class InvalidUploadException(AppException):
    http_status = status.HTTP_400_BAD_REQUEST
    code        = ErrorCode.INVALID_UPLOAD

    def __init__(self, message: str):
        super().__init__(message, field="file")
