"""Common API dependencies: current family extraction, role checks."""

from typing import Annotated, Optional

import jwt
from fastapi import Depends, HTTPException, Path, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from snackboard.database import get_session
from snackboard.models.family import Family
from snackboard.schemas.base import INT4_MAX
from snackboard.utils.security import decode_token

bearer_scheme = HTTPBearer(auto_error=False)

# Row ids in the URL, bounded like the integer columns they address
PathId = Annotated[int, Path(ge=0, le=INT4_MAX)]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_family(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> Family:
    """Extract and validate the logged-in family from its access token."""
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        payload = decode_token(credentials.credentials)
    except jwt.PyJWTError:
        raise _unauthorized("Invalid or expired token")

    if payload.get("type") != "access":
        raise _unauthorized("Invalid token type")

    family = session.get(Family, int(payload["sub"]))
    if not family:
        raise _unauthorized("Family not found")
    return family


def require_admin(family: Family = Depends(get_current_family)) -> Family:
    """Require the current family to be the admin account."""
    if not family.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return family


def check_family_access(current: Family, family_id: int) -> None:
    """A family may only touch its own data; the admin may touch anyone's."""
    if not current.is_admin and current.id != family_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied",
        )
