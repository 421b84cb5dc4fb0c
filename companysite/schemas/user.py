from datetime import datetime
from typing import Optional

from pydantic import Field

from companysite.schemas.common import CamelModel


# 1. Input: identity claims from the auth callback
class UserUpsert(CamelModel):
    id: str = Field(min_length=1)
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


# 2. Output
class UserResponse(UserUpsert):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CallbackRequest(CamelModel):
    token: str = Field(min_length=1)
