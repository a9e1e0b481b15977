"""Record projection: rows as flat `{field name: value}` documents."""

import logging
from typing import Any
from uuid import UUID

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from gridbase.models.cell import Cell
from gridbase.models.field import Field
from gridbase.models.row import Row
from gridbase.models.sheet import Sheet
from gridbase.schemas.cell import CellValue
from gridbase.services.ordering import lock_sheet, next_order

logger = logging.getLogger(__name__)

RECORD_ID_KEY = "_id"

_cell_value = TypeAdapter(CellValue)


class InvalidRecordValueError(ValueError):
    """Raised when a record holds a value a cell cannot store."""

    def __init__(self, field_name: str, error: ValidationError):
        self.field_name = field_name
        super().__init__(f"Invalid value for field '{field_name}'")


def flatten_row(fields: list[Field], row: Row, cells: list[Cell]) -> dict[str, Any]:
    """Build the record for one row.

    Every field appears in the result, in field order; fields without a cell
    read as None.
    """
    values_by_field = {cell.field_id: cell.value for cell in cells}
    record: dict[str, Any] = {RECORD_ID_KEY: None}
    for field in fields:
        record[field.name] = values_by_field.get(field.id)
    # A field named like the id key must not hide the row id
    record[RECORD_ID_KEY] = str(row.id)
    return record


class RecordService:
    """Reads and writes sheet rows in their flattened record form."""

    def __init__(self, db: Session):
        self.db = db

    def find_sheet(self, user_id: str, sheet_name: str) -> Sheet | None:
        """Find a user's sheet by name. Names are not unique; the oldest match wins."""
        return (
            self.db.query(Sheet)
            .filter(Sheet.user_id == user_id, Sheet.name == sheet_name)
            .order_by(Sheet.created_at, Sheet.id)
            .first()
        )

    def find_row(self, sheet: Sheet, row_id: UUID) -> Row | None:
        """Find a row only if it belongs to the sheet."""
        return self.db.query(Row).filter(Row.id == row_id, Row.sheet_id == sheet.id).first()

    def _fields(self, sheet: Sheet) -> list[Field]:
        return self.db.query(Field).filter(Field.sheet_id == sheet.id).order_by(Field.order).all()

    def _field_values(self, fields: list[Field], values: dict[str, Any]) -> dict[str, CellValue]:
        """Validate the values keyed by a field name; other keys are dropped."""
        validated: dict[str, CellValue] = {}
        for field in fields:
            if field.name not in values:
                continue
            try:
                validated[field.name] = _cell_value.validate_python(values[field.name])
            except ValidationError as e:
                raise InvalidRecordValueError(field.name, e) from e
        return validated

    def _cells(self, row_ids: list[UUID]) -> list[Cell]:
        if not row_ids:
            return []
        return self.db.query(Cell).filter(Cell.row_id.in_(row_ids)).all()

    def list_records(self, sheet: Sheet) -> list[dict[str, Any]]:
        """All rows of the sheet as records, ordered by row position."""
        fields = self._fields(sheet)
        rows = self.db.query(Row).filter(Row.sheet_id == sheet.id).order_by(Row.order).all()

        cells_by_row: dict[UUID, list[Cell]] = {row.id: [] for row in rows}
        for cell in self._cells([row.id for row in rows]):
            cells_by_row[cell.row_id].append(cell)

        return [flatten_row(fields, row, cells_by_row[row.id]) for row in rows]

    def get_record(self, sheet: Sheet, row: Row) -> dict[str, Any]:
        """One row as a record."""
        return flatten_row(self._fields(sheet), row, self._cells([row.id]))

    def create_record(self, sheet: Sheet, values: dict[str, Any]) -> dict[str, Any]:
        """Insert a row with one cell per field, taking values from the record.

        Keys that do not name a field are ignored. Row and cells are
        committed together.
        """
        try:
            lock_sheet(self.db, sheet.id)
            fields = self._fields(sheet)
            values = self._field_values(fields, values)

            row = Row(sheet_id=sheet.id, order=next_order(self.db, Row, sheet.id))
            self.db.add(row)
            self.db.flush()

            cells = [
                Cell(row_id=row.id, field_id=field.id, value=values.get(field.name))
                for field in fields
            ]
            self.db.add_all(cells)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(row)
        logger.info(f"Created record {row.id} in sheet {sheet.id}")
        return flatten_row(fields, row, cells)

    def update_record(
        self, sheet: Sheet, row: Row, values: dict[str, Any]
    ) -> dict[str, Any]:
        """Overwrite the cells of every field named in the record.

        Missing cells are created. Fields not named keep their values. All
        writes are committed together.
        """
        fields = self._fields(sheet)
        values = self._field_values(fields, values)
        try:
            existing = {cell.field_id: cell for cell in self._cells([row.id])}
            for field in fields:
                if field.name not in values:
                    continue
                cell = existing.get(field.id)
                if cell is None:
                    cell = Cell(row_id=row.id, field_id=field.id)
                    self.db.add(cell)
                    existing[field.id] = cell
                cell.value = values[field.name]
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Updated record {row.id} in sheet {sheet.id}")
        return self.get_record(sheet, row)

    def delete_record(self, row: Row) -> None:
        """Delete a row and, through the cascade, its cells."""
        self.db.delete(row)
        self.db.commit()
