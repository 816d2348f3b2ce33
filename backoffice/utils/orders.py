"""
Order total helpers

orders.total_amount is stored, not derived: nothing in the schema keeps it equal
to the sum of the order's items. Callers that change order_items recompute it here.
"""
import logging
from typing import Iterable, List, Optional, Tuple
from decimal import Decimal

from sqlalchemy import select, update, func
from sqlalchemy.orm import Session

from backoffice.models import Order, OrderItem

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def items_total():
    """Correlated SUM(quantity * unit_price) over the enclosing order's items"""
    return (
        select(func.coalesce(func.sum(OrderItem.quantity * OrderItem.unit_price), 0))
        .where(OrderItem.order_id == Order.id)
        .scalar_subquery()
    )


def update_order_totals(db: Session, order_ids: Optional[Iterable[int]] = None) -> int:
    """
    Set orders.total_amount from the order's items in one aggregate UPDATE.

    Only the given orders are touched when order_ids is passed. The session is
    not committed. Returns the number of orders updated.
    """
    # Pending items must be in the table before the aggregate runs
    db.flush()

    stmt = update(Order).values(total_amount=items_total())
    if order_ids is not None:
        stmt = stmt.where(Order.id.in_(list(order_ids)))

    result = db.execute(stmt.execution_options(synchronize_session=False))

    # Loaded orders still hold the old total
    for obj in list(db.identity_map.values()):
        if isinstance(obj, Order):
            db.expire(obj, ["total_amount"])

    logger.info(f"Recomputed total_amount for {result.rowcount} order(s)")
    return result.rowcount


def find_total_mismatches(db: Session) -> List[Tuple[int, Decimal, Decimal]]:
    """Orders whose stored total differs from their items, as (order_id, stored, computed)"""
    db.flush()
    computed = items_total()
    rows = db.execute(
        select(Order.id, Order.total_amount, computed.label("items_total"))
        .where(Order.total_amount != computed)
        .order_by(Order.id)
    ).all()
    return [(row.id, row.total_amount, Decimal(str(row.items_total)).quantize(CENTS)) for row in rows]
