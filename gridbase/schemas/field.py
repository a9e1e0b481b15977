"""Field schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from gridbase.models.enums import FieldType


class NumberFormat(BaseModel):
    """Display format for number fields."""

    model_config = ConfigDict(extra="allow")

    decimals: int | None = Field(None, ge=0, le=20)
    prefix: str | None = Field(None, max_length=20)
    suffix: str | None = Field(None, max_length=20)


class FieldOptions(BaseModel):
    """Type-dependent field options. Unknown keys are kept as-is."""

    model_config = ConfigDict(extra="allow")

    choices: list[str] | None = None
    number_format: NumberFormat | None = None
    date_format: str | None = Field(None, max_length=50)


class FieldCreate(BaseModel):
    """Create a new field."""

    name: str = Field(..., min_length=1, max_length=255)
    type: FieldType = FieldType.TEXT
    options: FieldOptions | None = None


class FieldUpdate(BaseModel):
    """Update a field."""

    name: str | None = Field(None, min_length=1, max_length=255)
    type: FieldType | None = None
    options: FieldOptions | None = None


class FieldResponse(BaseModel):
    """Field response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sheet_id: UUID
    name: str
    type: FieldType
    options: dict | None
    order: int
    created_at: datetime
    updated_at: datetime
