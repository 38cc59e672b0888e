#tasktracker/schemas/task.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import date, datetime

from tasktracker.schemas.user import UserSummary

class TaskCreate(BaseModel):
    """
    TaskCreate: new task. Title emptiness is checked by the service so a blank
    title is reported as a task validation error.
    """
    title: str = Field(..., examples=["Write docs"])
    description: Optional[str] = None
    assigned_to_id: Optional[int] = Field(None, description="Team member to assign")
    due_date: Optional[date] = Field(None, examples=["2026-12-31"])

class TaskUpdate(BaseModel):
    """
    TaskUpdate: partial update. Only keys actually sent are applied; status is
    validated by the service against the status enum.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    assigned_to_id: Optional[int] = None
    due_date: Optional[date] = None

class TaskRead(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    status: str
    created_by_id: int
    assigned_to_id: Optional[int] = None
    due_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime
    created_by: Optional[UserSummary] = None
    assigned_to: Optional[UserSummary] = None

    model_config = ConfigDict(from_attributes=True)

class TaskSummary(BaseModel):
    """
    Task counts per status for the caller's scope.
    """
    not_started: int = 0
    in_progress: int = 0
    done: int = 0
    rejected: int = 0
    total: int = 0
