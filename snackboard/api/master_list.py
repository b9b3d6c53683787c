"""Master shopping list API endpoints. Admin only."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from snackboard.api.deps import require_admin
from snackboard.database import get_session
from snackboard.models.family import Family
from snackboard.schemas.report import MasterListItem, MasterListSummaryResponse
from snackboard.services import report_service

router = APIRouter(prefix="/master-list", tags=["master-list"])


@router.get("", response_model=list[MasterListItem])
def get_master_list(
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Every snack any family wants, with quantities and points summed across families."""
    return report_service.get_master_list(session)


@router.get("/summary", response_model=MasterListSummaryResponse)
def get_master_list_summary(
    admin: Family = Depends(require_admin),
    session: Session = Depends(get_session),
):
    return report_service.get_master_list_summary(session)
