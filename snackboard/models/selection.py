"""Selection model: how many units of a snack a family wants."""

from typing import Optional

from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlmodel import Field, SQLModel


class Selection(SQLModel, table=True):
    __tablename__ = "selections"
    __table_args__ = (
        UniqueConstraint("family_id", "snack_id", name="uq_selection_family_snack"),
        CheckConstraint("quantity >= 0", name="ck_selection_quantity_non_negative"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    family_id: int = Field(foreign_key="families.id", index=True)
    snack_id: int = Field(foreign_key="snacks.id", index=True)
    quantity: int = Field(default=0)
