"""Sheet API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gridbase.api.dependencies import get_current_user
from gridbase.database import get_db
from gridbase.models.cell import Cell
from gridbase.models.field import Field
from gridbase.models.row import Row
from gridbase.models.sheet import Sheet
from gridbase.models.user import User
from gridbase.schemas.cell import CellResponse
from gridbase.schemas.field import FieldResponse
from gridbase.schemas.row import RowResponse
from gridbase.schemas.sheet import SheetCreate, SheetDetailResponse, SheetResponse, SheetUpdate

router = APIRouter(prefix="/api/sheets", tags=["sheets"])


def get_user_sheet(db: Session, sheet_id: UUID, user: User) -> Sheet:
    """Get a sheet the user owns. Sheets of other users are reported as missing."""
    sheet = db.query(Sheet).filter(Sheet.id == sheet_id, Sheet.user_id == user.id).first()
    if not sheet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sheet not found")
    return sheet


def get_owned_sheet(db: Session, sheet_id: UUID, user: User) -> Sheet:
    """Get a sheet, telling apart a missing sheet (404) from someone else's (403)."""
    sheet = db.query(Sheet).filter(Sheet.id == sheet_id).first()
    if not sheet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sheet not found")

    if sheet.user_id != user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")

    return sheet


@router.get("", response_model=list[SheetResponse])
def get_sheets(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get all sheets owned by the current user, oldest first."""
    return (
        db.query(Sheet)
        .filter(Sheet.user_id == current_user.id)
        .order_by(Sheet.created_at, Sheet.id)
        .all()
    )


@router.post("", response_model=SheetResponse, status_code=status.HTTP_201_CREATED)
def create_sheet(
    sheet_data: SheetCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new sheet."""
    sheet = Sheet(
        name=sheet_data.name,
        description=sheet_data.description or None,
        user_id=current_user.id,
    )
    db.add(sheet)
    db.commit()
    db.refresh(sheet)
    return sheet


@router.get("/{sheet_id}", response_model=SheetDetailResponse)
def get_sheet(
    sheet_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get a sheet with its fields, rows and cells."""
    sheet = get_user_sheet(db, sheet_id, current_user)

    fields = db.query(Field).filter(Field.sheet_id == sheet_id).order_by(Field.order).all()
    rows = db.query(Row).filter(Row.sheet_id == sheet_id).order_by(Row.order).all()
    cells = db.query(Cell).join(Row, Cell.row_id == Row.id).filter(Row.sheet_id == sheet_id).all()

    return SheetDetailResponse(
        sheet=SheetResponse.model_validate(sheet),
        fields=[FieldResponse.model_validate(f) for f in fields],
        rows=[RowResponse.model_validate(r) for r in rows],
        cells=[CellResponse.model_validate(c) for c in cells],
    )


@router.patch("/{sheet_id}", response_model=SheetResponse)
def update_sheet(
    sheet_id: UUID,
    sheet_data: SheetUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update a sheet's name and/or description."""
    sheet = get_user_sheet(db, sheet_id, current_user)

    if sheet_data.name:
        sheet.name = sheet_data.name
    # An explicit null clears the description
    if "description" in sheet_data.model_fields_set:
        sheet.description = sheet_data.description

    db.commit()
    db.refresh(sheet)
    return sheet


@router.delete("/{sheet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sheet(
    sheet_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a sheet together with its fields, rows and cells."""
    sheet = get_user_sheet(db, sheet_id, current_user)

    db.delete(sheet)
    db.commit()
