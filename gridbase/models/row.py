"""Row model."""

import uuid

from sqlalchemy import Column, ForeignKey, Integer, Uuid
from sqlalchemy.orm import relationship

from gridbase.database import Base
from gridbase.models.mixins import TimestampMixin


class Row(Base, TimestampMixin):
    """A record of a sheet."""

    __tablename__ = "rows"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    sheet_id = Column(
        Uuid, ForeignKey("sheets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    order = Column(Integer, nullable=False, default=0)

    # Relationships
    sheet = relationship("Sheet", back_populates="rows")
    cells = relationship(
        "Cell",
        back_populates="row",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
