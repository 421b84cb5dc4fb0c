# ========================================
# companysite/routes/job.py
# ========================================

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from companysite.database import get_storage
from companysite.schemas.job import JobCreate, JobResponse, JobUpdate
from companysite.schemas.user import UserResponse
from companysite.utils.auth import get_current_user

router = APIRouter(prefix="/api", tags=["Jobs"])

# ===========================
# PUBLIC ENDPOINTS
# ===========================


# ✅ 1. GET ALL JOBS (Public)
@router.get("/jobs", response_model=List[JobResponse])
def get_all_jobs(storage=Depends(get_storage)):
    """Open positions, newest first."""
    return storage.get_all_jobs()


# ✅ 2. GET SINGLE JOB (Public)
@router.get("/jobs/{job_id}", response_model=JobResponse)
def get_job(job_id: str, storage=Depends(get_storage)):
    """Get a job by id, including closed ones."""
    job = storage.get_job_by_id(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


# ===========================
# ADMIN ENDPOINTS
# ===========================


# ✅ 3. POST A JOB
@router.post("/jobs", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    job: JobCreate,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    return storage.create_job(job)


# ✅ 4. UPDATE JOB
@router.put("/jobs/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    job_update: JobUpdate,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    """Update only the fields present in the body."""
    update_data = job_update.model_dump(exclude_unset=True)
    return storage.update_job(job_id, update_data)


# ✅ 5. DELETE JOB
@router.delete("/jobs/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: str,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    """Take a job off the board. The posting and its applications are kept."""
    storage.delete_job(job_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
