"""Catalog business logic: categories and snacks.

Deletes cascade by hand: a category is detached from its snacks, a snack
takes its selections with it. Each delete is one transaction.
"""

import logging
from typing import Optional

from sqlmodel import Session, col, select

from snackboard.database import commit_or_raise
from snackboard.errors import FieldValidationError, NotFoundError
from snackboard.models.catalog import Category, Snack
from snackboard.models.selection import Selection

logger = logging.getLogger(__name__)


# --- Categories ---

def list_categories(session: Session) -> list[Category]:
    return list(session.exec(select(Category).order_by(col(Category.name))).all())


def get_category(session: Session, category_id: int) -> Category:
    category = session.get(Category, category_id)
    if not category:
        raise NotFoundError("Category not found")
    return category


def _ensure_category_name_free(session: Session, name: str, exclude_id: Optional[int] = None) -> None:
    query = select(Category).where(Category.name == name)
    if exclude_id is not None:
        query = query.where(Category.id != exclude_id)
    if session.exec(query).first():
        raise FieldValidationError(f"Category '{name}' already exists", field="name")


def create_category(session: Session, name: str) -> Category:
    _ensure_category_name_free(session, name)
    category = Category(name=name)
    session.add(category)
    commit_or_raise(session)
    session.refresh(category)
    logger.info("Created category %s (%s)", category.id, category.name)
    return category


def update_category(session: Session, category_id: int, changes: dict) -> Category:
    category = get_category(session, category_id)
    if "name" in changes:
        _ensure_category_name_free(session, changes["name"], exclude_id=category_id)
        category.name = changes["name"]
    session.add(category)
    commit_or_raise(session)
    session.refresh(category)
    return category


def delete_category(session: Session, category_id: int) -> None:
    """Delete a category. Its snacks stay, uncategorized."""
    category = get_category(session, category_id)

    snacks = session.exec(select(Snack).where(Snack.category_id == category_id)).all()
    for snack in snacks:
        snack.category_id = None
        session.add(snack)
    session.flush()

    session.delete(category)
    session.commit()
    logger.info("Deleted category %s, detached %d snacks", category_id, len(snacks))


# --- Snacks ---

def list_snacks(session: Session) -> list[tuple[Snack, Optional[Category]]]:
    """All snacks by name, each with its category (None when uncategorized)."""
    rows = session.exec(
        select(Snack, Category)
        .outerjoin(Category, Snack.category_id == Category.id)
        .order_by(col(Snack.name), col(Snack.id))
    ).all()
    return [(snack, category) for snack, category in rows]


def get_snack(session: Session, snack_id: int) -> Snack:
    snack = session.get(Snack, snack_id)
    if not snack:
        raise NotFoundError("Snack not found")
    return snack


def _check_category_ref(session: Session, category_id: Optional[int]) -> None:
    if category_id is not None and not session.get(Category, category_id):
        raise FieldValidationError("Category does not exist", field="categoryId")


def create_snack(session: Session, data: dict) -> Snack:
    _check_category_ref(session, data.get("category_id"))
    snack = Snack(**data)
    session.add(snack)
    commit_or_raise(session, field="categoryId")
    session.refresh(snack)
    logger.info("Created snack %s (%s, %d pts)", snack.id, snack.name, snack.points)
    return snack


def update_snack(session: Session, snack_id: int, changes: dict) -> Snack:
    snack = get_snack(session, snack_id)
    if "category_id" in changes:
        _check_category_ref(session, changes["category_id"])
    for key, value in changes.items():
        setattr(snack, key, value)
    session.add(snack)
    commit_or_raise(session, field="categoryId")
    session.refresh(snack)
    return snack


def delete_snack(session: Session, snack_id: int) -> None:
    """Delete a snack together with every selection of it."""
    snack = get_snack(session, snack_id)

    # Selections first (FK constraint)
    selections = session.exec(select(Selection).where(Selection.snack_id == snack_id)).all()
    for selection in selections:
        session.delete(selection)
    session.flush()

    session.delete(snack)
    session.commit()
    logger.info("Deleted snack %s and %d selections", snack_id, len(selections))
