"""Row schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from gridbase.schemas.cell import CellResponse


class RowResponse(BaseModel):
    """Row response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sheet_id: UUID
    order: int
    created_at: datetime
    updated_at: datetime


class RowWithCellsResponse(RowResponse):
    """Row response including the row's cells."""

    cells: list[CellResponse] = []
