from pydantic import BaseModel
from typing import Optional


class SettingUpdate(BaseModel):
    value: str


class SettingOut(BaseModel):
    key:       str
    value:     str
    updatedAt: Optional[str] = None
