from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional

from app.schemas.catalog import require_text, blank_to_none


class ContactCreateRequest(BaseModel):
    name:    str = Field(max_length=150)
    email:   EmailStr
    phone:   Optional[str] = Field(None, max_length=50)
    subject: Optional[str] = Field(None, max_length=255)
    message: str

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return require_text(v, "Name")

    @field_validator("message")
    @classmethod
    def check_message(cls, v):
        return require_text(v, "Message")

    @field_validator("phone", "subject", mode="before")
    @classmethod
    def empty_text(cls, v):
        v = blank_to_none(v)
        return v.strip() if isinstance(v, str) else v


class MessageReadRequest(BaseModel):
    read: bool = True
