"""Family account API endpoints, including the family board."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from snackboard.api.deps import PathId, check_family_access, get_current_family, require_admin
from snackboard.database import get_session
from snackboard.errors import FieldValidationError
from snackboard.models.family import Family, ROLE_ADMIN
from snackboard.schemas.family import (
    FamilyCreateRequest,
    FamilyResponse,
    FamilyUpdateRequest,
    FamilyWithTotalResponse,
)
from snackboard.schemas.report import FamilyBoardResponse
from snackboard.services import board_service, family_service

router = APIRouter(prefix="/families", tags=["families"])


@router.get("", response_model=list[FamilyWithTotalResponse])
def list_families(
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """All families by name with the points they currently use. Admin only."""
    return family_service.list_families_with_totals(session)


@router.get("/{family_id}", response_model=FamilyWithTotalResponse)
def get_family(
    family_id: PathId,
    family: Family = Depends(get_current_family),
    session: Session = Depends(get_session),
):
    check_family_access(family, family_id)
    return family_service.get_family_with_total(session, family_id)


@router.get("/{family_id}/board", response_model=FamilyBoardResponse)
def get_family_board(
    family_id: PathId,
    family: Family = Depends(get_current_family),
    session: Session = Depends(get_session),
):
    """Budget status and the snack catalog grouped by category with this family's quantities."""
    check_family_access(family, family_id)
    return board_service.get_family_board(session, family_id)


@router.post("", response_model=FamilyResponse, status_code=status.HTTP_201_CREATED)
def create_family(
    request: FamilyCreateRequest,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    family = family_service.create_family(
        session,
        name=request.name,
        access_code=request.access_code,
        points_allowed=request.points_allowed,
        role=request.role,
    )
    return FamilyResponse.model_validate(family)


@router.put("/{family_id}", response_model=FamilyResponse)
def update_family(
    family_id: PathId,
    request: FamilyUpdateRequest,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Partial update. A new access code replaces the old one."""
    changes = request.model_dump(exclude_unset=True)
    if family_id == admin.id and changes.get("role", ROLE_ADMIN) != ROLE_ADMIN:
        raise FieldValidationError("Cannot remove your own admin role", field="role")
    family = family_service.update_family(session, family_id, changes)
    return FamilyResponse.model_validate(family)


@router.delete("/{family_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_family(
    family_id: PathId,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Delete a family and its selections. Admin only. Cannot remove yourself."""
    if family_id == admin.id:
        raise FieldValidationError("Cannot remove yourself", field="familyId")
    family_service.delete_family(session, family_id)
