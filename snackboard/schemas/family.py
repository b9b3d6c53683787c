"""Family request/response schemas."""

from typing import Annotated, Literal, Optional

from snackboard.schemas.base import AccessCode, ApiModel, Count, Name, NotNull

Role = Literal["admin", "family"]


class FamilyCreateRequest(ApiModel):
    name: Name
    points_allowed: Count = 0
    access_code: AccessCode
    role: Role = "family"


class FamilyUpdateRequest(ApiModel):
    name: Annotated[Optional[Name], NotNull] = None
    points_allowed: Annotated[Optional[Count], NotNull] = None
    access_code: Annotated[Optional[AccessCode], NotNull] = None
    role: Annotated[Optional[Role], NotNull] = None


class FamilyResponse(ApiModel):
    id: int
    name: str
    points_allowed: int
    role: str


class FamilyWithTotalResponse(FamilyResponse):
    total_points_used: int
    points_remaining: int
