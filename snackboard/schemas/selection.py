"""Selection request/response schemas."""

from snackboard.schemas.base import ApiModel, Count, RowId
from snackboard.schemas.snack import SnackResponse


class SelectionUpsertRequest(ApiModel):
    family_id: RowId
    snack_id: RowId
    quantity: Count


class SelectionResponse(ApiModel):
    id: int
    family_id: int
    snack_id: int
    quantity: int


class SelectionWithSnackResponse(SelectionResponse):
    snack: SnackResponse
