"""Cell model."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, Uuid, func
from sqlalchemy.orm import relationship

from gridbase.database import Base
from gridbase.models.column_types import JSONValue
from gridbase.models.mixins import utcnow


class Cell(Base):
    """The value of one field for one row."""

    __tablename__ = "cells"
    __table_args__ = (UniqueConstraint("row_id", "field_id", name="uq_cells_row_field"),)

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    row_id = Column(Uuid, ForeignKey("rows.id", ondelete="CASCADE"), nullable=False, index=True)
    field_id = Column(
        Uuid, ForeignKey("fields.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # str | int | float | list[str] | None
    value = Column(JSONValue, nullable=True)
    updated_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
    )

    # Relationships
    row = relationship("Row", back_populates="cells")
    field = relationship("Field", back_populates="cells")
