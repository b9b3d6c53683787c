"""Master list and family board schemas."""

from typing import Optional

from snackboard.schemas.base import ApiModel
from snackboard.schemas.family import FamilyWithTotalResponse
from snackboard.schemas.snack import SnackResponse


class MasterListItem(ApiModel):
    snack_id: int
    snack_name: str
    store: Optional[str]
    total_quantity: int
    total_points: int


class MasterListSummaryResponse(ApiModel):
    items: list[MasterListItem]
    total_items: int
    total_points: int


class BoardSnack(SnackResponse):
    quantity: int
    selection_id: Optional[int]
    points_used: int


class BoardCategory(ApiModel):
    category_id: Optional[int]
    name: str
    snacks: list[BoardSnack]


class FamilyBoardResponse(ApiModel):
    family: FamilyWithTotalResponse
    points_remaining: int
    progress: float  # percent of budget used, capped at 100
    is_over_limit: bool
    categories: list[BoardCategory]
