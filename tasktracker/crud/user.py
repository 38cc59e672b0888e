#tasktracker/crud/user.py
import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from tasktracker.crud.filters import Predicates, apply
from tasktracker.models.user import User

logger = logging.getLogger("TaskTracker.UserStore")

def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.strip().lower()).first()

def get_users(db: Session, predicates: Optional[Predicates] = None) -> List[User]:
    query = apply(db.query(User), predicates)
    return query.order_by(User.name.asc(), User.id.asc()).all()

def add_user(db: Session, name: str, email: str, password_hash: str, role: str) -> User:
    """
    Stage a new user and flush it to obtain an id. The caller commits.
    """
    now = datetime.now(timezone.utc)
    user = User(
        name=name,
        email=email,
        password_hash=password_hash,
        role=role,
        created_at=now,
        updated_at=now,
    )
    db.add(user)
    db.flush()
    logger.debug(f"Staged user {user.id} ({user.email})")
    return user
