# ========================================
# companysite/routes/contact.py
# ========================================

from typing import List

from fastapi import APIRouter, Depends, Response, status

from companysite.database import get_storage
from companysite.schemas.contact import ContactMessageCreate, ContactMessageResponse, ContactStatusUpdate
from companysite.schemas.user import UserResponse
from companysite.utils.auth import get_current_user

router = APIRouter(prefix="/api", tags=["Contact"])


# ✅ 1. SEND A MESSAGE (Public)
@router.post("/contact", response_model=ContactMessageResponse, status_code=status.HTTP_201_CREATED)
def create_contact_message(message: ContactMessageCreate, storage=Depends(get_storage)):
    return storage.create_contact_message(message)


# ===========================
# ADMIN ENDPOINTS
# ===========================


# ✅ 2. INBOX
@router.get("/admin/contact-messages", response_model=List[ContactMessageResponse])
def get_all_contact_messages(
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    return storage.get_all_contact_messages()


# ✅ 3. MARK READ / REPLIED
@router.put("/admin/contact-messages/{message_id}/status", response_model=ContactMessageResponse)
def update_contact_message_status(
    message_id: str,
    status_update: ContactStatusUpdate,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    return storage.update_contact_message_status(message_id, status_update.status)


# ✅ 4. DELETE MESSAGE
@router.delete("/admin/contact-messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact_message(
    message_id: str,
    current_user: UserResponse = Depends(get_current_user),
    storage=Depends(get_storage),
):
    storage.delete_contact_message(message_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
