#tasktracker/api/task.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from tasktracker.dependencies import get_db, get_current_user
from tasktracker.models.user import User as UserModel
from tasktracker.schemas.task import TaskCreate, TaskRead, TaskSummary, TaskUpdate
from tasktracker.services import task_service

router = APIRouter(prefix="/tasks", tags=["Tasks"])

@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(
    data: TaskCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Create a task (leads only).
    """
    return task_service.create_task(db, current_user, data.model_dump())

@router.get("", response_model=List[TaskRead])
def list_tasks(
    status_filter: Optional[str] = Query(None, alias="status"),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Tasks created by the calling lead, or assigned to the calling team member.
    """
    if status_filter == "all":
        status_filter = None
    return task_service.list_tasks(db, current_user, status=status_filter, limit=limit)

@router.get("/summary", response_model=TaskSummary)
def task_summary(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return task_service.summarize_tasks(db, current_user)

@router.get("/{task_id}", response_model=TaskRead)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    return task_service.get_task(db, current_user, task_id)

@router.patch("/{task_id}", response_model=TaskRead)
def update_task(
    task_id: int,
    data: TaskUpdate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Partial update. Team members may only change the status.
    """
    return task_service.update_task(db, current_user, task_id, data.model_dump(exclude_unset=True))
