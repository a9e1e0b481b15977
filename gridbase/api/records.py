"""Public record API: a sheet addressed by owner and name, rows as flat records."""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, status

from gridbase.api.dependencies import get_current_user, get_record_service
from gridbase.models.row import Row
from gridbase.models.sheet import Sheet
from gridbase.models.user import User
from gridbase.services.records import InvalidRecordValueError, RecordService

router = APIRouter(prefix="/api/user/{user_id}/sheet/{sheet_name}", tags=["records"])

# Values are checked per field in the service; keys naming no field are ignored
RecordBody = Annotated[dict[str, Any], Body()]


def resolve_sheet(
    user_id: str,
    sheet_name: str,
    current_user: User,
    service: RecordService,
) -> Sheet:
    """Get the named sheet of the user in the path, who must be the caller."""
    if user_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")

    sheet = service.find_sheet(user_id, sheet_name)
    if not sheet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sheet not found")
    return sheet


def resolve_row(service: RecordService, sheet: Sheet, row_id: UUID) -> Row:
    row = service.find_row(sheet, row_id)
    if not row:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Row not found")
    return row


@router.get("")
def list_records(
    user_id: str,
    sheet_name: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecordService, Depends(get_record_service)],
) -> list[dict[str, Any]]:
    """Get every row of the sheet as a record."""
    sheet = resolve_sheet(user_id, sheet_name, current_user, service)
    return service.list_records(sheet)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_record(
    user_id: str,
    sheet_name: str,
    values: RecordBody,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecordService, Depends(get_record_service)],
) -> dict[str, Any]:
    """Append a row built from the record's values."""
    sheet = resolve_sheet(user_id, sheet_name, current_user, service)
    try:
        return service.create_record(sheet, values)
    except InvalidRecordValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/{row_id}")
def get_record(
    user_id: str,
    sheet_name: str,
    row_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecordService, Depends(get_record_service)],
) -> dict[str, Any]:
    """Get one row as a record."""
    sheet = resolve_sheet(user_id, sheet_name, current_user, service)
    row = resolve_row(service, sheet, row_id)
    return service.get_record(sheet, row)


@router.put("/{row_id}")
def update_record(
    user_id: str,
    sheet_name: str,
    row_id: UUID,
    values: RecordBody,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecordService, Depends(get_record_service)],
) -> dict[str, Any]:
    """Overwrite the values named in the record."""
    sheet = resolve_sheet(user_id, sheet_name, current_user, service)
    row = resolve_row(service, sheet, row_id)
    try:
        return service.update_record(sheet, row, values)
    except InvalidRecordValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.delete("/{row_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_record(
    user_id: str,
    sheet_name: str,
    row_id: UUID,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[RecordService, Depends(get_record_service)],
) -> None:
    """Delete one row."""
    sheet = resolve_sheet(user_id, sheet_name, current_user, service)
    row = resolve_row(service, sheet, row_id)
    service.delete_record(row)
