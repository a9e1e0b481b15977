"""Row API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gridbase.api.dependencies import get_current_user
from gridbase.api.sheets import get_owned_sheet, get_user_sheet
from gridbase.database import get_db
from gridbase.models.cell import Cell
from gridbase.models.field import Field
from gridbase.models.row import Row
from gridbase.models.sheet import Sheet
from gridbase.models.user import User
from gridbase.schemas.order import ReorderRequest
from gridbase.schemas.row import RowResponse, RowWithCellsResponse
from gridbase.services.ordering import (
    UnknownOrderTargetError,
    apply_order,
    lock_sheet,
    next_order,
)

router = APIRouter(prefix="/api", tags=["rows"])


@router.post(
    "/sheets/{sheet_id}/rows",
    response_model=RowWithCellsResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_row(
    sheet_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Append a row with an empty cell for every field of the sheet."""
    get_user_sheet(db, sheet_id, current_user)

    lock_sheet(db, sheet_id)
    row = Row(sheet_id=sheet_id, order=next_order(db, Row, sheet_id))
    db.add(row)
    db.flush()

    field_ids = [
        field_id for (field_id,) in db.query(Field.id).filter(Field.sheet_id == sheet_id).all()
    ]
    if field_ids:
        db.add_all([Cell(row_id=row.id, field_id=field_id, value=None) for field_id in field_ids])

    db.commit()
    db.refresh(row)
    return row


@router.patch("/sheets/{sheet_id}/rows/reorder", response_model=list[RowResponse])
def reorder_rows(
    sheet_id: UUID,
    reorder_data: ReorderRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Move several rows at once. Either every position is applied or none is."""
    get_owned_sheet(db, sheet_id, current_user)

    try:
        apply_order(db, Row, sheet_id, reorder_data.orders)
    except UnknownOrderTargetError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    db.commit()

    return db.query(Row).filter(Row.sheet_id == sheet_id).order_by(Row.order).all()


@router.delete("/rows/{row_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_row(
    row_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a row and its cells."""
    result = (
        db.query(Row, Sheet.user_id)
        .join(Sheet, Row.sheet_id == Sheet.id)
        .filter(Row.id == row_id)
        .first()
    )
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Row not found")

    row, owner_id = result
    if owner_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")

    db.delete(row)
    db.commit()
