# ========================================
# companysite/routes/application.py
# ========================================

from typing import List

from fastapi import APIRouter, Depends, status

from companysite.database import get_storage
from companysite.schemas.application import (
    ApplicationCreate,
    ApplicationForm,
    ApplicationResponse,
    ApplicationStatusUpdate,
    ApplicationWithJob,
)
from companysite.schemas.user import UserResponse
from companysite.utils.auth import get_current_user

router = APIRouter(prefix="/api", tags=["Applications"])

# ===========================
# PUBLIC ENDPOINTS
# ===========================


# ✅ 1. APPLY FOR JOB (job in the URL)
@router.post(
    "/jobs/{job_id}/applications",
    response_model=ApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
def apply_to_job(job_id: str, application: ApplicationForm, storage=Depends(get_storage)):
    """Submit an application. New applications always start as pending."""
    data = ApplicationCreate(**application.model_dump(), job_id=job_id)
    return storage.create_job_application(data)


# ✅ 2. APPLY FOR JOB (job in the body)
@router.post("/applications", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
def create_application(application: ApplicationCreate, storage=Depends(get_storage)):
    return storage.create_job_application(application)


# ===========================
# ADMIN ENDPOINTS
# ===========================


# ✅ 3. ALL APPLICATIONS
@router.get("/applications", response_model=List[ApplicationWithJob])
def get_all_applications(
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    """Every application with its job title, newest first."""
    return storage.get_all_applications()


# ✅ 4. APPLICATIONS FOR ONE JOB
@router.get("/jobs/{job_id}/applications", response_model=List[ApplicationResponse])
def get_applications_for_job(
    job_id: str,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    return storage.get_applications_for_job(job_id)


# ✅ 5. UPDATE APPLICATION STATUS
@router.put("/applications/{application_id}/status", response_model=ApplicationResponse)
def update_application_status(
    application_id: str,
    status_update: ApplicationStatusUpdate,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    return storage.update_application_status(application_id, status_update.status)
