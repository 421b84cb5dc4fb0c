# ========================================
# companysite/routes/announcement.py
# ========================================

from typing import List

from fastapi import APIRouter, Depends, Response, status

from companysite.database import get_storage, utcnow
from companysite.schemas.announcement import AnnouncementCreate, AnnouncementResponse, AnnouncementUpdate
from companysite.schemas.user import UserResponse
from companysite.utils.auth import get_current_user

router = APIRouter(prefix="/api", tags=["Announcements"])

# ===========================
# PUBLIC ENDPOINTS
# ===========================


# ✅ 1. PUBLISHED ANNOUNCEMENTS
@router.get("/announcements", response_model=List[AnnouncementResponse])
def get_published_announcements(storage=Depends(get_storage)):
    """Published announcements, most recently published first."""
    return storage.get_published_announcements()


# ===========================
# ADMIN ENDPOINTS
# ===========================


# ✅ 2. ALL ANNOUNCEMENTS (drafts included)
@router.get("/admin/announcements", response_model=List[AnnouncementResponse])
def get_all_announcements(
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    return storage.get_all_announcements()


# ✅ 3. CREATE ANNOUNCEMENT
@router.post("/announcements", response_model=AnnouncementResponse, status_code=status.HTTP_201_CREATED)
def create_announcement(
    announcement: AnnouncementCreate,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    """Create an announcement; publishing without a date stamps it with now."""
    if announcement.is_published and announcement.published_at is None:
        announcement = announcement.model_copy(update={"published_at": utcnow()})
    return storage.create_announcement(announcement)


# ✅ 4. UPDATE ANNOUNCEMENT
@router.put("/announcements/{announcement_id}", response_model=AnnouncementResponse)
def update_announcement(
    announcement_id: str,
    announcement_update: AnnouncementUpdate,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    update_data = announcement_update.model_dump(exclude_unset=True)
    if update_data.get("is_published") and update_data.get("published_at") is None:
        update_data["published_at"] = utcnow()
    return storage.update_announcement(announcement_id, update_data)


# ✅ 5. DELETE ANNOUNCEMENT
@router.delete("/announcements/{announcement_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_announcement(
    announcement_id: str,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    storage.delete_announcement(announcement_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
