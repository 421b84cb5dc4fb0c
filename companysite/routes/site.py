# ========================================
# companysite/routes/site.py
# ========================================

from fastapi import APIRouter, Depends

from companysite.database import get_storage
from companysite.schemas.stats import StatsResponse

router = APIRouter(tags=["Site"])

VERSION = "1.0.0"


@router.get("/")
def root():
    """API root endpoint"""
    return {
        "status": "Company site API running",
        "version": VERSION,
        "documentation": "/docs",
    }


@router.get("/health")
def health_check(storage=Depends(get_storage)):
    """Health check endpoint"""
    return {"status": "healthy", "storage": storage.name, "version": VERSION}


@router.get("/api/admin/simple", response_model=StatsResponse)
def content_summary(storage=Depends(get_storage)):
    """Counts of what the public site currently shows."""
    return {
        "jobs": len(storage.get_all_jobs()),
        "announcements": len(storage.get_published_announcements()),
        "applications": len(storage.get_all_applications()),
        "message": "Database contains data. Use /admin route for full management.",
    }
