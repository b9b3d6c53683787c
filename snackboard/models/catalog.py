"""Snack catalog models."""

from typing import Optional

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)


class Snack(SQLModel, table=True):
    __tablename__ = "snacks"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    store: Optional[str] = None  # Costco, Superstore, ...
    link: Optional[str] = None
    points: int = Field(default=0)
    image_url: Optional[str] = None
    category_id: Optional[int] = Field(default=None, foreign_key="categories.id", index=True)
