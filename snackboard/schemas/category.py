"""Category request/response schemas."""

from typing import Annotated, Optional

from snackboard.schemas.base import ApiModel, Name, NotNull


class CategoryCreateRequest(ApiModel):
    name: Name


class CategoryUpdateRequest(ApiModel):
    name: Annotated[Optional[Name], NotNull] = None


class CategoryResponse(ApiModel):
    id: int
    name: str
