"""User and login session models."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from gridbase.database import Base
from gridbase.models.mixins import TimestampMixin


def generate_user_id() -> str:
    return str(uuid.uuid4())


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "user"

    id = Column(String(36), primary_key=True, default=generate_user_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    email_verified = Column(Boolean, nullable=False, default=False)
    image = Column(String, nullable=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    sheets = relationship(
        "Sheet",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    sessions = relationship(
        "UserSession",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class UserSession(Base, TimestampMixin):
    """A login session. Access tokens reference it so logout can revoke them."""

    __tablename__ = "session"

    id = Column(String(36), primary_key=True, default=generate_user_id)
    user_id = Column(
        String(36), ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    expires_at = Column(DateTime(timezone=True), nullable=False)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(String, nullable=True)

    # Relationships
    user = relationship("User", back_populates="sessions")
