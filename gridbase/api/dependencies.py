"""FastAPI dependencies for authentication and database."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from gridbase.database import get_db
from gridbase.models.user import User, UserSession
from gridbase.services.auth import decode_access_token, get_active_session
from gridbase.services.records import RecordService

# auto_error=False so a missing header is a 401 like every other auth failure
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_session(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> UserSession:
    """Get the login session behind the bearer token."""
    if credentials is None:
        raise _unauthorized("Unauthorized")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise _unauthorized("Invalid authentication credentials")

    user_id = payload.get("sub")
    session_id = payload.get("sid")
    if user_id is None or session_id is None:
        raise _unauthorized("Invalid authentication credentials")

    session = get_active_session(db, session_id, user_id)
    if session is None:
        raise _unauthorized("Session expired or revoked")

    return session


def get_current_user(
    session: Annotated[UserSession, Depends(get_current_session)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from JWT token."""
    user = db.query(User).filter(User.id == session.user_id).first()
    if user is None:
        raise _unauthorized("User not found")

    return user


def get_record_service(
    db: Annotated[Session, Depends(get_db)],
) -> RecordService:
    """Get record service with dependencies."""
    return RecordService(db)
