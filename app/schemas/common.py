"""Response envelopes shared by every router."""
from math import ceil
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


# ─── Pagination ───────────────────────────────────────────────────────────────
class PaginationMeta(BaseModel):
    page:       int
    limit:      int
    total:      int
    totalPages: int
    hasNext:    bool
    hasPrev:    bool

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        pages = ceil(total / limit) if limit > 0 else 0
        return cls(page=page, limit=limit, total=total, totalPages=pages,
                   hasNext=page < pages, hasPrev=page > 1)


def page_offset(page: int, limit: int) -> int:
    """Row offset of a 1-based page."""
    return (page - 1) * limit


# ─── Envelopes ────────────────────────────────────────────────────────────────
class SuccessResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data:    T | None = None


class PaginatedResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data:    list[T]
    meta:    PaginationMeta


def success_response(message: str, data: Any = None) -> dict:
    return {"success": True, "message": message, "data": data}


def paginated_response(message: str, data: list, total: int, page: int, limit: int) -> dict:
    """Admin list envelope: one page of rows plus the numbers the table pager needs."""
    return {
        "success": True,
        "message": message,
        "data":    data,
        "meta":    PaginationMeta.build(total, page, limit).model_dump(),
    }
