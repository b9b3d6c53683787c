"""Family accounts and their points totals.

Totals are never stored: every read sums quantity x points over the
family's selections, so they follow selection, snack and delete changes
immediately.
"""

import logging
from typing import Optional

from sqlmodel import Session, col, func, select

from snackboard.database import commit_or_raise
from snackboard.errors import FieldValidationError, NotFoundError
from snackboard.models.catalog import Snack
from snackboard.models.family import Family
from snackboard.models.selection import Selection
from snackboard.utils.security import hash_access_code

logger = logging.getLogger(__name__)


def _totals_query():
    used = func.coalesce(func.sum(Selection.quantity * Snack.points), 0).label("total_points_used")
    return (
        select(Family, used)
        .outerjoin(Selection, Selection.family_id == Family.id)
        .outerjoin(Snack, Snack.id == Selection.snack_id)
        .group_by(Family.id)
    )


def _with_total(family: Family, used: int) -> dict:
    return {
        "id": family.id,
        "name": family.name,
        "points_allowed": family.points_allowed,
        "role": family.role,
        "total_points_used": int(used),
        "points_remaining": family.points_allowed - int(used),
    }


def list_families_with_totals(session: Session) -> list[dict]:
    """Every family, by name, with the points its selections currently use."""
    rows = session.exec(_totals_query().order_by(col(Family.name))).all()
    return [_with_total(family, used) for family, used in rows]


def get_family_with_total(session: Session, family_id: int) -> dict:
    row = session.exec(_totals_query().where(Family.id == family_id)).first()
    if not row:
        raise NotFoundError("Family not found")
    family, used = row
    return _with_total(family, used)


def get_family(session: Session, family_id: int) -> Family:
    family = session.get(Family, family_id)
    if not family:
        raise NotFoundError("Family not found")
    return family


def get_family_by_name(session: Session, name: str) -> Optional[Family]:
    return session.exec(select(Family).where(Family.name == name)).first()


def _ensure_name_free(session: Session, name: str, exclude_id: Optional[int] = None) -> None:
    existing = get_family_by_name(session, name)
    if existing and existing.id != exclude_id:
        raise FieldValidationError(f"Family '{name}' already exists", field="name")


def create_family(
    session: Session,
    name: str,
    access_code: str,
    points_allowed: int = 0,
    role: str = "family",
) -> Family:
    _ensure_name_free(session, name)
    family = Family(
        name=name,
        points_allowed=points_allowed,
        access_code_hash=hash_access_code(access_code),
        role=role,
    )
    session.add(family)
    commit_or_raise(session)
    session.refresh(family)
    logger.info("Created family %s (%s, role=%s)", family.id, family.name, family.role)
    return family


def update_family(session: Session, family_id: int, changes: dict) -> Family:
    family = get_family(session, family_id)
    if "name" in changes:
        _ensure_name_free(session, changes["name"], exclude_id=family_id)
        family.name = changes["name"]
    if "points_allowed" in changes:
        family.points_allowed = changes["points_allowed"]
    if "role" in changes:
        family.role = changes["role"]
    if "access_code" in changes:
        family.access_code_hash = hash_access_code(changes["access_code"])
    session.add(family)
    commit_or_raise(session)
    session.refresh(family)
    return family


def delete_family(session: Session, family_id: int) -> None:
    """Delete a family and its selections."""
    family = get_family(session, family_id)

    selections = session.exec(select(Selection).where(Selection.family_id == family_id)).all()
    for selection in selections:
        session.delete(selection)
    session.flush()

    session.delete(family)
    session.commit()
    logger.info("Deleted family %s and %d selections", family_id, len(selections))
