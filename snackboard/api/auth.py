"""Login API endpoints."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from snackboard.api.deps import get_current_family
from snackboard.database import get_session
from snackboard.models.family import Family
from snackboard.schemas.auth import LoginRequest, LoginResponse
from snackboard.schemas.family import FamilyResponse
from snackboard.services.auth_service import login as login_family

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, session: Session = Depends(get_session)):
    """Check name + access code. Returns the family record and an access token."""
    family, token = login_family(session, request.name, request.access_code)
    return LoginResponse(
        **FamilyResponse.model_validate(family).model_dump(),
        access_token=token,
    )


@router.get("/me", response_model=FamilyResponse)
def get_me(family: Family = Depends(get_current_family)):
    """The family the presented token belongs to."""
    return FamilyResponse.model_validate(family)
