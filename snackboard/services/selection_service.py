"""Selection upsert and lookup.

A selection is the (family, snack) -> quantity cell. Setting a quantity
always leaves a row behind, including quantity 0; aggregates skip zeros.
The existence check and the write are separate statements with no lock,
so two concurrent writers to the same pair resolve as last write wins.
"""

import logging

from sqlmodel import Session, select

from snackboard.database import commit_or_raise
from snackboard.errors import FieldValidationError
from snackboard.models.catalog import Snack
from snackboard.models.family import Family
from snackboard.models.selection import Selection

logger = logging.getLogger(__name__)


def upsert_selection(session: Session, family_id: int, snack_id: int, quantity: int) -> Selection:
    """Set how many of a snack a family wants. Returns the stored row."""
    if quantity < 0:
        raise FieldValidationError("Quantity must be 0 or more", field="quantity")
    if not session.get(Family, family_id):
        raise FieldValidationError("Family does not exist", field="familyId")
    if not session.get(Snack, snack_id):
        raise FieldValidationError("Snack does not exist", field="snackId")

    selection = get_selection(session, family_id, snack_id)
    if selection:
        selection.quantity = quantity
    else:
        selection = Selection(family_id=family_id, snack_id=snack_id, quantity=quantity)
    session.add(selection)
    commit_or_raise(session, field="snackId")
    session.refresh(selection)

    logger.debug("Family %s set snack %s to %d", family_id, snack_id, quantity)
    return selection


def get_selection(session: Session, family_id: int, snack_id: int) -> Selection | None:
    return session.exec(
        select(Selection).where(
            Selection.family_id == family_id,
            Selection.snack_id == snack_id,
        )
    ).first()


def list_selections(session: Session, family_id: int) -> list[tuple[Selection, Snack]]:
    """A family's selection rows (zeros included), each joined with its snack."""
    rows = session.exec(
        select(Selection, Snack)
        .join(Snack, Snack.id == Selection.snack_id)
        .where(Selection.family_id == family_id)
        .order_by(Selection.id)
    ).all()
    return [(selection, snack) for selection, snack in rows]
