# tasktracker/services/user_service.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tasktracker.core import permissions
from tasktracker.core.entities import UserRef
from tasktracker.core.exceptions import (
    DuplicateEmail,
    ForbiddenError,
    InternalError,
    UserValidationError,
)
from tasktracker.core.security import get_password_hash, verify_password
from tasktracker.crud import user as user_store
from tasktracker.crud.filters import Predicates
from tasktracker.models.enums import LogAction, UserRole, values_of
from tasktracker.models.user import User
from tasktracker.services import activity_log_service

logger = logging.getLogger("TaskTracker.Users")

PASSWORD_MIN_LENGTH = 8
NAME_MIN_LENGTH = 2


def _role(value: Any) -> str:
    if isinstance(value, UserRole):
        return value.value
    if value not in values_of(UserRole):
        raise UserValidationError(f"Invalid role: {value!r}", details={"allowed": values_of(UserRole)})
    return value


def register_user(db: Session, data: Dict[str, Any]) -> User:
    """
    Create an account and log its creation, attributed to the new user.
    """
    name = (data.get("name") or "").strip()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    role = _role(data.get("role", UserRole.TEAM_MEMBER.value))

    if len(name) < NAME_MIN_LENGTH:
        raise UserValidationError(f"Name must be at least {NAME_MIN_LENGTH} characters")
    if "@" not in email:
        raise UserValidationError("A valid email is required")
    if len(password) < PASSWORD_MIN_LENGTH:
        raise UserValidationError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    if user_store.get_user_by_email(db, email):
        raise DuplicateEmail()

    try:
        user = user_store.add_user(db, name=name, email=email, password_hash=get_password_hash(password), role=role)
        activity_log_service.record(db, user.id, UserRef(user.id), LogAction.CREATED, {"role": role})
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Duplicate registration for {email}: {e}")
        raise DuplicateEmail()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to register user {email}: {e}", exc_info=True)
        raise InternalError("Database error while registering user")

    logger.info(f"Registered user {user.id} ({user.role})")
    return user


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    user = user_store.get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user


def list_users(db: Session, actor: User, role: Optional[str] = None) -> List[User]:
    if not permissions.can_list_users(actor):
        raise ForbiddenError("Only leads can list users")
    predicates = Predicates()
    if role is not None:
        predicates.add_eq(User.role, _role(role))
    return user_store.get_users(db, predicates)
