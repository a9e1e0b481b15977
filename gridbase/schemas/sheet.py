"""Sheet schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from gridbase.schemas.cell import CellResponse
from gridbase.schemas.field import FieldResponse
from gridbase.schemas.row import RowResponse


class SheetCreate(BaseModel):
    """Create a new sheet."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)


class SheetUpdate(BaseModel):
    """Update a sheet. An empty name leaves the current one in place."""

    name: str | None = Field(None, max_length=255)
    description: str | None = Field(None, max_length=2000)


class SheetResponse(BaseModel):
    """Sheet response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None
    user_id: str
    created_at: datetime
    updated_at: datetime


class SheetDetailResponse(BaseModel):
    """A sheet with its ordered fields, ordered rows and all of their cells."""

    sheet: SheetResponse
    fields: list[FieldResponse]
    rows: list[RowResponse]
    cells: list[CellResponse]
