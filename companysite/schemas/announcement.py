# ========================================
# companysite/schemas/announcement.py
# ========================================

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from companysite.schemas.common import CamelModel, as_utc, not_null


class AnnouncementCreate(CamelModel):
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    category: str = Field(min_length=1)  # product-update, partnership, team-news, ...
    is_published: bool = False
    published_at: Optional[datetime] = None

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, value):
        return as_utc(value)


class AnnouncementUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    is_published: Optional[bool] = None
    published_at: Optional[datetime] = None

    @field_validator("title", "content", "category", "is_published")
    @classmethod
    def required_not_null(cls, value):
        return not_null(value)

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, value):
        return as_utc(value)


class AnnouncementResponse(AnnouncementCreate):
    id: str
    created_at: datetime
    updated_at: datetime
