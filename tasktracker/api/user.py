#tasktracker/api/user.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tasktracker.dependencies import get_db, get_current_user
from tasktracker.models.user import User as UserModel
from tasktracker.schemas.user import UserRead
from tasktracker.services import user_service

router = APIRouter(prefix="/users", tags=["Users"])

@router.get("", response_model=List[UserRead])
def list_users(
    role: Optional[str] = Query(None, description="lead | team_member"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    List users (leads only), optionally by role.
    """
    return user_service.list_users(db, current_user, role=role)
