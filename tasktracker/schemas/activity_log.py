#tasktracker/schemas/activity_log.py
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime

from tasktracker.schemas.user import UserBrief

class EntitySummary(BaseModel):
    """
    The task or user a log entry refers to. `label` is the task title or the
    user name; None when the row no longer exists.
    """
    type: str
    id: int
    label: Optional[str] = None

class ActivityLogRead(BaseModel):
    id: int
    entity_type: str
    entity_id: int
    action: str
    user_id: int
    details: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    user: Optional[UserBrief] = None
    entity: EntitySummary
