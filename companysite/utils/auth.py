from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from companysite.config import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY
from companysite.database import get_storage
from companysite.schemas.user import UserResponse, UserUpsert

# the identity provider signs tokens with the shared SECRET_KEY;
# missing headers are rejected below with 401 instead of the scheme's default
security = HTTPBearer(auto_error=False)


def credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(data: dict, expires_minutes: int = ACCESS_TOKEN_EXPIRE_MINUTES) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_identity(token: str) -> UserUpsert:
    """Verify a token and turn its claims into a user record."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise credentials_exception()

    user_id = payload.get("sub")
    if not user_id:
        raise credentials_exception()

    claims = {"id": user_id}
    for claim in ("email", "first_name", "last_name", "profile_image_url"):
        if claim in payload:
            claims[claim] = payload[claim]
    return UserUpsert(**claims)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    storage=Depends(get_storage),
) -> UserResponse:
    """Admin gate: a valid token for a user who has been through the callback."""
    if credentials is None:
        raise credentials_exception()

    identity = decode_identity(credentials.credentials)
    user = storage.get_user(identity.id)
    if user is None:
        raise credentials_exception()

    return user
