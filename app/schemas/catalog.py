from pydantic import BaseModel, Field, field_validator
from typing import Literal, Optional

from app.models.category import DEFAULT_COLOR
from app.utils.json_fields import coerce_json_list


# ─── Shared validators ────────────────────────────────────────────────────────
def require_text(v: str | None, label: str) -> str:
    if v is None or not str(v).strip():
        raise ValueError(f"{label} cannot be empty")
    return str(v).strip()


def blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


def unique_ids(v):
    """
    Drop blanks and repeated ids, keeping first-seen order.
    Anything that is not a list of strings is handed back untouched so the
    field's own type check rejects it.
    """
    if v is None:
        return []
    if not isinstance(v, (list, tuple)):
        return v
    seen = []
    for item in v:
        if isinstance(item, str):
            item = item.strip()
            if not item:
                continue
        if item not in seen:
            seen.append(item)
    return seen


OPTIONAL_TEXT = (
    "description", "longDescription", "contentDescription",
    "image", "heroImage", "metaTitle", "metaDescription",
)


# ─── JSON list items ──────────────────────────────────────────────────────────
class BrandModelItem(BaseModel):
    name:  str
    years: str = ""


class SpecificationItem(BaseModel):
    label: str
    value: str = ""


# ─── Vehicle brand ────────────────────────────────────────────────────────────
class VehicleBrandWriteRequest(BaseModel):
    """
    Body for both create and update.
    Update is a full replace: anything omitted falls back to the defaults below.
    """
    name:               str = Field(max_length=150)
    slug:               str = Field(max_length=150)
    fullName:           Optional[str] = Field(None, max_length=255)
    description:        Optional[str] = None
    longDescription:    Optional[str] = None
    contentDescription: Optional[str] = None
    type:               Literal["truck", "pickup"] = "truck"
    models:             list[BrandModelItem] = []
    image:              Optional[str] = Field(None, max_length=500)
    heroImage:          Optional[str] = Field(None, max_length=500)
    gallery:            list[str] = []
    metaTitle:          Optional[str] = Field(None, max_length=255)
    metaDescription:    Optional[str] = None
    sortOrder:          int  = 0
    published:          bool = True
    categoryIds:        list[str] = []

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return require_text(v, "Name")

    @field_validator("slug")
    @classmethod
    def check_slug(cls, v):
        return require_text(v, "Slug")

    @field_validator("fullName", *OPTIONAL_TEXT, mode="before")
    @classmethod
    def empty_text(cls, v):
        return blank_to_none(v)

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, v):
        return v or "truck"

    @field_validator("models", "gallery", mode="before")
    @classmethod
    def parse_json_lists(cls, v):
        return coerce_json_list(v)

    @field_validator("sortOrder", mode="before")
    @classmethod
    def default_sort(cls, v):
        return 0 if v in (None, "") else v

    @field_validator("published", mode="before")
    @classmethod
    def default_published(cls, v):
        return True if v is None else v

    @field_validator("categoryIds", mode="before")
    @classmethod
    def check_ids(cls, v):
        return unique_ids(v)


# ─── Category ─────────────────────────────────────────────────────────────────
class CategoryWriteRequest(BaseModel):
    """Body for both create and update (full replace, like brands)."""
    name:               str = Field(max_length=150)
    slug:               str = Field(max_length=150)
    description:        Optional[str] = None
    longDescription:    Optional[str] = None
    contentDescription: Optional[str] = None
    icon:               Optional[str] = Field(None, max_length=100)
    color:              str = Field(DEFAULT_COLOR, max_length=20)
    features:           list[str] = []
    benefits:           list[str] = []
    specifications:     list[SpecificationItem] = []
    image:              Optional[str] = Field(None, max_length=500)
    heroImage:          Optional[str] = Field(None, max_length=500)
    gallery:            list[str] = []
    metaTitle:          Optional[str] = Field(None, max_length=255)
    metaDescription:    Optional[str] = None
    sortOrder:          int  = 0
    published:          bool = True
    vehicleBrandIds:    list[str] = []

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return require_text(v, "Name")

    @field_validator("slug")
    @classmethod
    def check_slug(cls, v):
        return require_text(v, "Slug")

    @field_validator("icon", *OPTIONAL_TEXT, mode="before")
    @classmethod
    def empty_text(cls, v):
        return blank_to_none(v)

    @field_validator("color", mode="before")
    @classmethod
    def default_color(cls, v):
        return v or DEFAULT_COLOR

    @field_validator("features", "benefits", "specifications", "gallery", mode="before")
    @classmethod
    def parse_json_lists(cls, v):
        return coerce_json_list(v)

    @field_validator("sortOrder", mode="before")
    @classmethod
    def default_sort(cls, v):
        return 0 if v in (None, "") else v

    @field_validator("published", mode="before")
    @classmethod
    def default_published(cls, v):
        return True if v is None else v

    @field_validator("vehicleBrandIds", mode="before")
    @classmethod
    def check_ids(cls, v):
        return unique_ids(v)
