"""Login request/response schemas."""

from typing import Annotated

from pydantic import StringConstraints

from snackboard.schemas.base import ApiModel
from snackboard.schemas.family import FamilyResponse


class LoginRequest(ApiModel):
    # Names are stored stripped; codes are compared exactly as typed
    name: Annotated[str, StringConstraints(strip_whitespace=True)]
    access_code: str


class LoginResponse(FamilyResponse):
    access_token: str
    token_type: str = "bearer"
