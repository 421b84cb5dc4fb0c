# ========================================
# companysite/routes/auth.py
# ========================================

from fastapi import APIRouter, Depends

from companysite.database import get_storage
from companysite.log import get_logger
from companysite.schemas.user import CallbackRequest, UserResponse
from companysite.utils.auth import decode_identity, get_current_user

router = APIRouter(prefix="/api/auth", tags=["Auth"])
logger = get_logger(__name__)


# ✅ 1. LOGIN CALLBACK
@router.post("/callback", response_model=UserResponse)
def auth_callback(body: CallbackRequest, storage=Depends(get_storage)):
    """Record the signed-in user from the identity provider's token."""
    identity = decode_identity(body.token)
    user = storage.upsert_user(identity)
    logger.info("User %s signed in", user.id)
    return user


# ✅ 2. CURRENT USER
@router.get("/user", response_model=UserResponse)
def get_auth_user(current_user: UserResponse = Depends(get_current_user)):
    return current_user
