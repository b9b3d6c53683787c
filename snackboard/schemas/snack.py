"""Snack request/response schemas."""

from typing import Annotated, Optional

from snackboard.schemas.base import ApiModel, Count, Name, NotNull, RowId, Url
from snackboard.schemas.category import CategoryResponse


class SnackCreateRequest(ApiModel):
    name: Name
    store: Optional[str] = None
    link: Optional[Url] = None
    points: Count = 0
    image_url: Optional[Url] = None
    category_id: Optional[RowId] = None


class SnackUpdateRequest(ApiModel):
    """Partial update. Omitted fields stay; explicit null clears a nullable field."""

    name: Annotated[Optional[Name], NotNull] = None
    store: Optional[str] = None
    link: Optional[Url] = None
    points: Annotated[Optional[Count], NotNull] = None
    image_url: Optional[Url] = None
    category_id: Optional[RowId] = None


class SnackResponse(ApiModel):
    id: int
    name: str
    store: Optional[str]
    link: Optional[str]
    points: int
    image_url: Optional[str]
    category_id: Optional[int]


class SnackWithCategoryResponse(SnackResponse):
    category: Optional[CategoryResponse]
