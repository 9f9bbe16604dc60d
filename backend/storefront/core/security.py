from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import BaseModel

from storefront.core.config import settings
from storefront.core.logger import setup_logger

logger = setup_logger("core.security")

http_bearer = HTTPBearer(auto_error=False)


class CallerIdentity(BaseModel):
    """Caller resolved from a bearer token issued by the identity provider."""
    user_id: str


def decode_identity(token: str) -> Optional[CallerIdentity]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.info(f"Rejected bearer token: {e}")
        return None
    subject = payload.get("sub")
    if not subject:
        return None
    return CallerIdentity(user_id=str(subject))


def get_optional_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(http_bearer),
) -> Optional[CallerIdentity]:
    if not credentials or not credentials.credentials:
        return None
    return decode_identity(credentials.credentials)


def get_current_identity(
    identity: Optional[CallerIdentity] = Depends(get_optional_identity),
) -> CallerIdentity:
    if identity is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return identity
