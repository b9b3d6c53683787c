"""Selection API endpoints."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from snackboard.api.deps import PathId, check_family_access, get_current_family
from snackboard.database import get_session
from snackboard.models.family import Family
from snackboard.schemas.selection import (
    SelectionResponse,
    SelectionUpsertRequest,
    SelectionWithSnackResponse,
)
from snackboard.schemas.snack import SnackResponse
from snackboard.services import family_service, selection_service

router = APIRouter(prefix="/selections", tags=["selections"])


@router.get("/{family_id}", response_model=list[SelectionWithSnackResponse])
def list_selections(
    family_id: PathId,
    family: Family = Depends(get_current_family),
    session: Session = Depends(get_session),
):
    """A family's selection rows with their snacks, zero quantities included."""
    check_family_access(family, family_id)
    family_service.get_family(session, family_id)
    return [
        SelectionWithSnackResponse(
            **SelectionResponse.model_validate(selection).model_dump(),
            snack=SnackResponse.model_validate(snack),
        )
        for selection, snack in selection_service.list_selections(session, family_id)
    ]


@router.post("", response_model=SelectionResponse)
def upsert_selection(
    request: SelectionUpsertRequest,
    family: Family = Depends(get_current_family),
    session: Session = Depends(get_session),
):
    """Set the quantity of one snack for one family (creates the row if needed)."""
    check_family_access(family, request.family_id)
    selection = selection_service.upsert_selection(
        session, request.family_id, request.snack_id, request.quantity
    )
    return SelectionResponse.model_validate(selection)
