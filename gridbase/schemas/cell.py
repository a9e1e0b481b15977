"""Cell schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr

# Strict members keep JSON booleans from being coerced to 0/1
CellValue = StrictBool | StrictInt | StrictFloat | StrictStr | list[StrictStr] | None


class CellUpdate(BaseModel):
    """Overwrite a cell value. `null` clears it."""

    value: CellValue


class CellResponse(BaseModel):
    """Cell response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    row_id: UUID
    field_id: UUID
    value: CellValue
    updated_at: datetime
