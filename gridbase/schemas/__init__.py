"""Pydantic schemas for API requests and responses."""

from gridbase.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from gridbase.schemas.cell import CellResponse, CellUpdate, CellValue
from gridbase.schemas.field import FieldCreate, FieldOptions, FieldResponse, FieldUpdate
from gridbase.schemas.order import OrderEntry, ReorderRequest
from gridbase.schemas.row import RowResponse, RowWithCellsResponse
from gridbase.schemas.sheet import (
    SheetCreate,
    SheetDetailResponse,
    SheetResponse,
    SheetUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "UserResponse",
    "SheetCreate",
    "SheetUpdate",
    "SheetResponse",
    "SheetDetailResponse",
    "FieldCreate",
    "FieldUpdate",
    "FieldOptions",
    "FieldResponse",
    "RowResponse",
    "RowWithCellsResponse",
    "CellUpdate",
    "CellResponse",
    "CellValue",
    "OrderEntry",
    "ReorderRequest",
]
