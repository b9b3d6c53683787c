"""Snack API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from snackboard.api.deps import PathId, get_current_family, require_admin
from snackboard.database import get_session
from snackboard.models.catalog import Category, Snack
from snackboard.models.family import Family
from snackboard.schemas.category import CategoryResponse
from snackboard.schemas.snack import (
    SnackCreateRequest,
    SnackResponse,
    SnackUpdateRequest,
    SnackWithCategoryResponse,
)
from snackboard.services import catalog_service

router = APIRouter(prefix="/snacks", tags=["snacks"])


def _snack_with_category(snack: Snack, category: Category | None) -> SnackWithCategoryResponse:
    return SnackWithCategoryResponse(
        **SnackResponse.model_validate(snack).model_dump(),
        category=CategoryResponse.model_validate(category) if category else None,
    )


@router.get("", response_model=list[SnackWithCategoryResponse])
def list_snacks(
    family: Family = Depends(get_current_family),
    session: Session = Depends(get_session),
):
    """All snacks by name, each with its category."""
    return [_snack_with_category(s, c) for s, c in catalog_service.list_snacks(session)]


@router.get("/{snack_id}", response_model=SnackWithCategoryResponse)
def get_snack(
    snack_id: PathId,
    family: Family = Depends(get_current_family),
    session: Session = Depends(get_session),
):
    snack = catalog_service.get_snack(session, snack_id)
    category = session.get(Category, snack.category_id) if snack.category_id else None
    return _snack_with_category(snack, category)


@router.post("", response_model=SnackResponse, status_code=status.HTTP_201_CREATED)
def create_snack(
    request: SnackCreateRequest,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    snack = catalog_service.create_snack(session, request.model_dump())
    return SnackResponse.model_validate(snack)


@router.put("/{snack_id}", response_model=SnackResponse)
def update_snack(
    snack_id: PathId,
    request: SnackUpdateRequest,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Partial update: only the fields present in the body change."""
    snack = catalog_service.update_snack(
        session, snack_id, request.model_dump(exclude_unset=True)
    )
    return SnackResponse.model_validate(snack)


@router.delete("/{snack_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_snack(
    snack_id: PathId,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Delete a snack and every family's selection of it."""
    catalog_service.delete_snack(session, snack_id)
