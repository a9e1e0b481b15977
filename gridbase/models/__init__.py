"""SQLAlchemy models."""

from gridbase.models.cell import Cell
from gridbase.models.field import Field
from gridbase.models.row import Row
from gridbase.models.sheet import Sheet
from gridbase.models.user import User, UserSession

__all__ = [
    "User",
    "UserSession",
    "Sheet",
    "Field",
    "Row",
    "Cell",
]
