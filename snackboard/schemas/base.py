"""Shared schema config: camelCase JSON on the wire, snake_case in Python."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

# Integer columns hold 32-bit values
INT4_MAX = 2**31 - 1

# bcrypt only reads the first 72 bytes of a secret
ACCESS_CODE_MAX_BYTES = 72

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
Url = Annotated[str, StringConstraints(strip_whitespace=True, max_length=2048)]
Count = Annotated[int, Field(ge=0, le=INT4_MAX)]
RowId = Annotated[int, Field(ge=0, le=INT4_MAX)]


def _fits_bcrypt(value: str) -> str:
    if len(value.encode()) > ACCESS_CODE_MAX_BYTES:
        raise ValueError(f"must be at most {ACCESS_CODE_MAX_BYTES} bytes")
    return value


# Kept exactly as typed: the code is hashed and must match at login byte for byte
AccessCode = Annotated[str, StringConstraints(min_length=1), AfterValidator(_fits_bcrypt)]


def _not_null(value):
    if value is None:
        raise ValueError("cannot be null")
    return value


# Partial updates: a required column may be omitted but not set to null
NotNull = AfterValidator(_not_null)


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
