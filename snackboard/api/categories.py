"""Category API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from snackboard.api.deps import PathId, get_current_family, require_admin
from snackboard.database import get_session
from snackboard.models.family import Family
from snackboard.schemas.category import (
    CategoryCreateRequest,
    CategoryResponse,
    CategoryUpdateRequest,
)
from snackboard.services import catalog_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
def list_categories(
    family: Family = Depends(get_current_family),
    session: Session = Depends(get_session),
):
    return [CategoryResponse.model_validate(c) for c in catalog_service.list_categories(session)]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    request: CategoryCreateRequest,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    category = catalog_service.create_category(session, request.name)
    return CategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: PathId,
    request: CategoryUpdateRequest,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Rename a category. Omitted fields are left as they are."""
    category = catalog_service.update_category(
        session, category_id, request.model_dump(exclude_unset=True)
    )
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: PathId,
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Delete a category. Snacks in it become uncategorized."""
    catalog_service.delete_category(session, category_id)
