"""Field API endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from gridbase.api.dependencies import get_current_user
from gridbase.api.sheets import get_owned_sheet, get_user_sheet
from gridbase.database import get_db
from gridbase.models.field import Field
from gridbase.models.user import User
from gridbase.schemas.field import FieldCreate, FieldOptions, FieldResponse, FieldUpdate
from gridbase.schemas.order import ReorderRequest
from gridbase.services.ordering import (
    UnknownOrderTargetError,
    apply_order,
    lock_sheet,
    next_order,
)

router = APIRouter(prefix="/api/sheets/{sheet_id}/fields", tags=["fields"])


def _options_to_json(options: FieldOptions | None) -> dict | None:
    if options is None:
        return None
    return options.model_dump(exclude_none=True) or None


def get_sheet_field(db: Session, sheet_id: UUID, field_id: UUID) -> Field:
    """Get a field of the given sheet."""
    field = db.query(Field).filter(Field.id == field_id, Field.sheet_id == sheet_id).first()
    if not field:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Field not found")
    return field


@router.get("", response_model=list[FieldResponse])
def get_fields(
    sheet_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get all fields of a sheet in display order."""
    get_user_sheet(db, sheet_id, current_user)

    return db.query(Field).filter(Field.sheet_id == sheet_id).order_by(Field.order).all()


@router.post("", response_model=FieldResponse, status_code=status.HTTP_201_CREATED)
def create_field(
    sheet_id: UUID,
    field_data: FieldCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Append a new field after the sheet's last one.

    Existing rows get no cell for it; their value reads as null until written.
    """
    get_user_sheet(db, sheet_id, current_user)

    lock_sheet(db, sheet_id)
    field = Field(
        sheet_id=sheet_id,
        name=field_data.name,
        type=field_data.type.value,
        options=_options_to_json(field_data.options),
        order=next_order(db, Field, sheet_id),
    )
    db.add(field)
    db.commit()
    db.refresh(field)
    return field


@router.patch("/reorder", response_model=list[FieldResponse])
def reorder_fields(
    sheet_id: UUID,
    reorder_data: ReorderRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Move several fields at once. Either every position is applied or none is."""
    get_owned_sheet(db, sheet_id, current_user)

    try:
        apply_order(db, Field, sheet_id, reorder_data.orders)
    except UnknownOrderTargetError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    db.commit()

    return db.query(Field).filter(Field.sheet_id == sheet_id).order_by(Field.order).all()


@router.patch("/{field_id}", response_model=FieldResponse)
def update_field(
    sheet_id: UUID,
    field_id: UUID,
    field_data: FieldUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Rename a field or change its type or options. Stored cell values are left as they are."""
    get_user_sheet(db, sheet_id, current_user)
    field = get_sheet_field(db, sheet_id, field_id)

    if field_data.name is not None:
        field.name = field_data.name
    if field_data.type is not None:
        field.type = field_data.type.value
    if "options" in field_data.model_fields_set:
        field.options = _options_to_json(field_data.options)

    db.commit()
    db.refresh(field)
    return field


@router.delete("/{field_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_field(
    sheet_id: UUID,
    field_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a field and every cell holding a value for it."""
    get_user_sheet(db, sheet_id, current_user)
    field = get_sheet_field(db, sheet_id, field_id)

    db.delete(field)
    db.commit()
