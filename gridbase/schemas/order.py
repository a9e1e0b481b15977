"""Reorder request schemas shared by fields and rows."""

from uuid import UUID

from pydantic import BaseModel, Field


class OrderEntry(BaseModel):
    """New position for one field or row."""

    id: UUID
    order: int = Field(..., ge=0)


class ReorderRequest(BaseModel):
    """Batch of position changes applied together."""

    orders: list[OrderEntry]
