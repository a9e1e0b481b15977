"""Sheet model."""

import uuid

from sqlalchemy import Column, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from gridbase.database import Base
from gridbase.models.mixins import TimestampMixin


class Sheet(Base, TimestampMixin):
    """A named table owned by one user."""

    __tablename__ = "sheets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=True)
    user_id = Column(
        String(36), ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Relationships
    user = relationship("User", back_populates="sheets")
    fields = relationship(
        "Field",
        back_populates="sheet",
        order_by="Field.order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    rows = relationship(
        "Row",
        back_populates="sheet",
        order_by="Row.order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
