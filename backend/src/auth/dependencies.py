# pyright: reportMissingTypeStubs=false
"""
Authentication dependencies for FastAPI.

Sessions are issued elsewhere; requests carry a bearer JWT whose user_id
claim identifies the caller.
"""

import logging
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from services.jwt_service import jwt_service

logger = logging.getLogger(__name__)


# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> int:
    """Resolve the authenticated user id from the bearer token."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token not provided"
        )

    payload = jwt_service.verify_token(credentials.credentials)
    if not payload:
        logger.info("Rejected request with invalid or expired token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token invalid"
        )

    return payload.user_id
