"""Master shopping list: every family's selections rolled up per snack."""

from sqlmodel import Session, col, func, select

from snackboard.models.catalog import Snack
from snackboard.models.selection import Selection


def get_master_list(session: Session) -> list[dict]:
    """One row per snack with any quantity > 0, by snack name.

    Zero-quantity rows are filtered before grouping, so a snack nobody
    wants does not show up at all.
    """
    total_quantity = func.sum(Selection.quantity).label("total_quantity")
    total_points = func.sum(Selection.quantity * Snack.points).label("total_points")

    rows = session.exec(
        select(Snack.id, Snack.name, Snack.store, total_quantity, total_points)
        .select_from(Selection)
        .join(Snack, Snack.id == Selection.snack_id)
        .where(Selection.quantity > 0)
        .group_by(Snack.id, Snack.name, Snack.store)
        .order_by(col(Snack.name), col(Snack.id))
    ).all()

    return [
        {
            "snack_id": snack_id,
            "snack_name": name,
            "store": store,
            "total_quantity": int(quantity),
            "total_points": int(points),
        }
        for snack_id, name, store, quantity, points in rows
    ]


def get_master_list_summary(session: Session) -> dict:
    items = get_master_list(session)
    return {
        "items": items,
        "total_items": sum(item["total_quantity"] for item in items),
        "total_points": sum(item["total_points"] for item in items),
    }
