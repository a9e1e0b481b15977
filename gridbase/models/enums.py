"""Enums for model fields."""

from enum import Enum


class FieldType(str, Enum):
    """Column types a sheet field can take."""

    TEXT = "text"
    LONG_TEXT = "longText"
    NUMBER = "number"
    SELECT = "select"
    MULTI_SELECT = "multiSelect"
    DATE = "date"
    DATETIME = "datetime"
