"""
Identity provider for the API.

Requests carry ``Authorization: Bearer <jwt>``; the ``sub`` claim is the
opaque user id.  The dependency never raises: a missing, malformed or
expired token simply means there is no identity, and the endpoint decides
what to answer (normally 401 via the ownership guard).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from store_admin.config import settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    expiry = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    payload = {"sub": user_id, "exp": int(expiry.timestamp())}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_user_id(token: str) -> Optional[str]:
    """Return the user id carried by ``token`` or None if it is not valid."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        logger.info("Rejected bearer token: %s", exc)
        return None
    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        return None
    return user_id


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    if credentials is None:
        return None
    return decode_user_id(credentials.credentials)


async def identify_request(request: Request) -> Optional[str]:
    """Resolve the caller outside of dependency injection, e.g. in exception handlers."""
    return get_current_user_id(await bearer_scheme(request))
