"""Cell API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gridbase.api.dependencies import get_current_user
from gridbase.database import get_db
from gridbase.models.cell import Cell
from gridbase.models.mixins import utcnow
from gridbase.models.row import Row
from gridbase.models.sheet import Sheet
from gridbase.models.user import User
from gridbase.schemas.cell import CellResponse, CellUpdate

router = APIRouter(prefix="/api/cells", tags=["cells"])


@router.patch("/{cell_id}", response_model=CellResponse)
def update_cell(
    cell_id: UUID,
    cell_data: CellUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Overwrite a cell's value."""
    # Cell -> Row -> Sheet gives the owner
    result = (
        db.query(Cell, Sheet.user_id)
        .join(Row, Cell.row_id == Row.id)
        .join(Sheet, Row.sheet_id == Sheet.id)
        .filter(Cell.id == cell_id)
        .first()
    )
    if not result:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Cell not found")

    cell, owner_id = result
    if owner_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")

    cell.value = cell_data.value
    cell.updated_at = utcnow()

    db.commit()
    db.refresh(cell)
    return cell
