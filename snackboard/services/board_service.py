"""Family board: everything a family's selection screen shows, in one read.

Snacks are grouped by category with uncategorized ones under
"Other" at the end, and carry the family's current quantity.
"""

from sqlmodel import Session, select

from snackboard.models.selection import Selection
from snackboard.services.catalog_service import list_snacks
from snackboard.services.family_service import get_family_with_total

UNCATEGORIZED = "Other"


def budget_progress(used: int, allowed: int) -> float:
    """Percent of the budget used, capped at 100. A zero budget reads as 0."""
    if allowed <= 0:
        return 0.0
    return min(used / allowed * 100, 100.0)


def get_family_board(session: Session, family_id: int) -> dict:
    family = get_family_with_total(session, family_id)

    selections = {
        s.snack_id: s
        for s in session.exec(select(Selection).where(Selection.family_id == family_id)).all()
    }

    groups: dict[int | None, dict] = {}
    for snack, category in list_snacks(session):
        category_id = category.id if category else None
        group = groups.setdefault(category_id, {
            "category_id": category_id,
            "name": category.name if category else UNCATEGORIZED,
            "snacks": [],
        })
        selection = selections.get(snack.id)
        quantity = selection.quantity if selection else 0
        group["snacks"].append({
            **snack.model_dump(),
            "quantity": quantity,
            "selection_id": selection.id if selection else None,
            "points_used": quantity * snack.points,
        })

    ordered = sorted(groups.values(), key=lambda g: (g["category_id"] is None, g["name"]))
    remaining = family["points_remaining"]

    return {
        "family": family,
        "points_remaining": remaining,
        "progress": budget_progress(family["total_points_used"], family["points_allowed"]),
        "is_over_limit": remaining < 0,
        "categories": ordered,
    }
