"""Family model."""

from typing import Optional

from sqlmodel import Field, SQLModel

ROLE_ADMIN = "admin"
ROLE_FAMILY = "family"


class Family(SQLModel, table=True):
    __tablename__ = "families"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True)  # login identifier, e.g. "RAW"
    points_allowed: int = Field(default=0)
    access_code_hash: str = ""
    role: str = Field(default=ROLE_FAMILY)  # 'admin' | 'family'

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
