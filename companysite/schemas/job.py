# ========================================
# companysite/schemas/job.py
# ========================================

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from companysite.schemas.common import CamelModel, not_null


# 1. Input: what the admin sends
class JobCreate(CamelModel):
    title: str = Field(min_length=1)
    department: str = Field(min_length=1)
    job_type: str = Field(alias="type", min_length=1)  # full-time, part-time, contract
    location: str = Field(min_length=1)
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    description: str = Field(min_length=1)
    requirements: str = Field(min_length=1)
    benefits: Optional[str] = None
    skills: List[str] = Field(min_length=1)
    is_active: bool = True


# 2. Input: partial update
class JobUpdate(CamelModel):
    """Any subset of JobCreate; nullable columns may be cleared with null."""

    title: Optional[str] = Field(None, min_length=1)
    department: Optional[str] = Field(None, min_length=1)
    job_type: Optional[str] = Field(None, alias="type", min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    description: Optional[str] = Field(None, min_length=1)
    requirements: Optional[str] = Field(None, min_length=1)
    benefits: Optional[str] = None
    skills: Optional[List[str]] = Field(None, min_length=1)
    is_active: Optional[bool] = None

    @field_validator(
        "title", "department", "job_type", "location",
        "description", "requirements", "skills", "is_active",
    )
    @classmethod
    def required_not_null(cls, value):
        return not_null(value)


# 3. Output
class JobResponse(JobCreate):
    id: str
    created_at: datetime
    updated_at: datetime
