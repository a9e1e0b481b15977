"""Field (column definition) model."""

import uuid

from sqlalchemy import Column, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from gridbase.database import Base
from gridbase.models.enums import FieldType
from gridbase.models.mixins import TimestampMixin
from gridbase.models.column_types import JSONValue


class Field(Base, TimestampMixin):
    """A typed column of a sheet."""

    __tablename__ = "fields"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    sheet_id = Column(
        Uuid, ForeignKey("sheets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String, nullable=False)
    type = Column(String(20), nullable=False, default=FieldType.TEXT.value)
    # {"choices": [...]} | {"number_format": {...}} | {"date_format": "..."}
    options = Column(JSONValue, nullable=True)
    order = Column(Integer, nullable=False, default=0)

    # Relationships
    sheet = relationship("Sheet", back_populates="fields")
    cells = relationship(
        "Cell",
        back_populates="field",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
