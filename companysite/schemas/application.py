# ========================================
# companysite/schemas/application.py
# ========================================

from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field, field_validator

from companysite.schemas.common import CamelModel, check_url

ApplicationStatus = Literal["pending", "reviewing", "accepted", "rejected"]
APPLICATION_STATUSES = ("pending", "reviewing", "accepted", "rejected")


# 1. Input: applicant form (job comes from the URL)
class ApplicationForm(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    portfolio_url: Optional[str] = None
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None

    @field_validator("portfolio_url", "resume_url")
    @classmethod
    def _valid_url(cls, value):
        return check_url(value)


# 2. Input: full application (job named in the body)
class ApplicationCreate(ApplicationForm):
    job_id: str = Field(min_length=1)


# 3. Input: status change
class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus


# 4. Output
class ApplicationResponse(ApplicationCreate):
    id: str
    status: ApplicationStatus = "pending"
    created_at: datetime
    updated_at: datetime


# 5. Output with the title of the job applied to
class ApplicationWithJob(ApplicationResponse):
    job_title: Optional[str] = None
