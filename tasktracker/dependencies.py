# tasktracker/dependencies.py

from typing import Generator, Optional
from fastapi import Depends
from sqlalchemy.orm import Session
from tasktracker.core.exceptions import UnauthenticatedError
from tasktracker.core.security import oauth2_scheme, verify_access_token
from tasktracker.crud.user import get_user
from tasktracker.database import SessionLocal
from tasktracker.models.user import User

def get_db() -> Generator[Session, None, None]:
    """
    Yield a database session and close it once the request is done.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the bearer token to the acting user. Every service call receives
    this user explicitly as its actor.
    """
    if not token:
        raise UnauthenticatedError("Not authenticated")
    payload = verify_access_token(token)
    if payload is None:
        raise UnauthenticatedError()
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise UnauthenticatedError()
    user = get_user(db, user_id)
    if user is None:
        raise UnauthenticatedError()
    return user
