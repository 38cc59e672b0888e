#tasktracker/api/activity_log.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tasktracker.dependencies import get_db, get_current_user
from tasktracker.models.user import User as UserModel
from tasktracker.schemas.activity_log import ActivityLogRead
from tasktracker.services import activity_log_service

router = APIRouter(prefix="/activity-logs", tags=["Activity"])

@router.get("", response_model=List[ActivityLogRead])
def list_activity_logs(
    entity_type: Optional[str] = Query(None, description="task | user"),
    action: Optional[str] = Query(None),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Recent activity. Team members only see their own actions.
    """
    return activity_log_service.list_logs(
        db, current_user, entity_type=entity_type, action=action, limit=limit
    )
