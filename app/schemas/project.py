from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.schemas.catalog import require_text, blank_to_none
from app.utils.json_fields import coerce_json_list


class ProjectWriteRequest(BaseModel):
    """
    Body for both create and update.
    ``authorId`` is never accepted from the client: it is the creating admin.
    """
    title:           str = Field(max_length=255)
    slug:            str = Field(max_length=255)
    description:     Optional[str] = None
    content:         Optional[str] = None
    categoryId:      Optional[str] = None
    vehicleBrand:    Optional[str] = Field(None, max_length=150)
    vehicleModel:    Optional[str] = Field(None, max_length=150)
    year:            Optional[str] = Field(None, max_length=10)
    images:          list[str] = []
    thumbnail:       Optional[str] = Field(None, max_length=500)
    metaTitle:       Optional[str] = Field(None, max_length=255)
    metaDescription: Optional[str] = None
    featured:        bool = False
    published:       bool = False

    @field_validator("title")
    @classmethod
    def check_title(cls, v):
        return require_text(v, "Title")

    @field_validator("slug")
    @classmethod
    def check_slug(cls, v):
        return require_text(v, "Slug")

    @field_validator(
        "description", "content", "categoryId", "vehicleBrand", "vehicleModel",
        "thumbnail", "metaTitle", "metaDescription", mode="before",
    )
    @classmethod
    def empty_text(cls, v):
        return blank_to_none(v)

    @field_validator("year", mode="before")
    @classmethod
    def year_as_text(cls, v):
        if v is None or v == "":
            return None
        return str(v).strip()

    @field_validator("images", mode="before")
    @classmethod
    def parse_images(cls, v):
        return coerce_json_list(v)

    @field_validator("featured", "published", mode="before")
    @classmethod
    def default_flags(cls, v):
        return False if v is None else v
