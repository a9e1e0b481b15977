"""Display-order bookkeeping for fields and rows."""

import logging
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from gridbase.models.field import Field
from gridbase.models.mixins import utcnow
from gridbase.models.row import Row
from gridbase.models.sheet import Sheet
from gridbase.schemas.order import OrderEntry

logger = logging.getLogger(__name__)

Orderable = type[Field] | type[Row]


class UnknownOrderTargetError(ValueError):
    """Raised when a reorder batch names ids that do not belong to the sheet."""

    def __init__(self, missing: list[UUID]):
        self.missing = missing
        super().__init__(f"Unknown ids for this sheet: {', '.join(str(m) for m in missing)}")


def lock_sheet(db: Session, sheet_id: UUID) -> Sheet:
    """Lock the sheet row until the current transaction ends.

    Serializes writers that compute positions from the sheet's current
    maximum. SQLite has no row locks and ignores FOR UPDATE.
    """
    return db.query(Sheet).filter(Sheet.id == sheet_id).with_for_update().one()


def next_order(db: Session, model: Orderable, sheet_id: UUID) -> int:
    """Return max(order) + 1 for the sheet's fields or rows, 0 when there are none.

    Callers must hold the sheet lock (see `lock_sheet`) and insert the new
    object in the same transaction.
    """
    current_max = db.query(func.max(model.order)).filter(model.sheet_id == sheet_id).scalar()
    position = 0 if current_max is None else current_max + 1
    logger.debug(f"Next {model.__tablename__} order for sheet {sheet_id}: {position}")
    return position


def apply_order(db: Session, model: Orderable, sheet_id: UUID, orders: list[OrderEntry]) -> None:
    """Assign new positions to several fields or rows of one sheet.

    All ids must belong to the sheet; otherwise nothing is changed. The
    caller commits, so the batch lands in a single transaction.
    """
    requested = {entry.id for entry in orders}
    known = {
        obj_id
        for (obj_id,) in db.query(model.id)
        .filter(model.sheet_id == sheet_id, model.id.in_(list(requested)))
        .all()
    }
    missing = sorted(requested - known, key=str)
    if missing:
        raise UnknownOrderTargetError(missing)

    for entry in orders:
        db.query(model).filter(model.id == entry.id).update(
            {model.order: entry.order, model.updated_at: utcnow()},
            synchronize_session="fetch",
        )

    logger.info(f"Reordered {len(orders)} {model.__tablename__} in sheet {sheet_id}")
