from datetime import datetime
from typing import Literal

from pydantic import EmailStr, Field

from companysite.schemas.common import CamelModel

ContactStatus = Literal["unread", "read", "replied"]
CONTACT_STATUSES = ("unread", "read", "replied")


class ContactMessageCreate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactStatusUpdate(CamelModel):
    status: ContactStatus


class ContactMessageResponse(ContactMessageCreate):
    id: str
    status: ContactStatus = "unread"
    created_at: datetime
    updated_at: datetime
