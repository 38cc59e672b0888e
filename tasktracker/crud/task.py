#tasktracker/crud/task.py
from datetime import datetime, timezone
from typing import Dict, List, Optional
import logging
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload
from tasktracker.crud.filters import Predicates, apply
from tasktracker.models.task import Task

logger = logging.getLogger("TaskTracker.TaskStore")

def _with_people(query):
    return query.options(joinedload(Task.created_by), joinedload(Task.assigned_to))

def get_task(db: Session, task_id: int) -> Optional[Task]:
    """
    Load a task with its creator and assignee, or None.
    """
    return _with_people(db.query(Task)).filter(Task.id == task_id).first()

def get_tasks(db: Session, predicates: Optional[Predicates] = None, limit: Optional[int] = None) -> List[Task]:
    """
    Tasks matching every predicate, newest first.
    """
    query = apply(_with_people(db.query(Task)), predicates)
    query = query.order_by(Task.created_at.desc(), Task.id.desc())
    if limit is not None:
        query = query.limit(limit)
    return query.all()

def count_tasks_by_status(db: Session, predicates: Optional[Predicates] = None) -> Dict[str, int]:
    query = apply(db.query(Task.status, func.count(Task.id)), predicates)
    rows = query.group_by(Task.status).all()
    return {status: int(count) for status, count in rows}

def add_task(db: Session, data: dict) -> Task:
    """
    Stage a new task and flush it to obtain an id. The caller commits.
    """
    now = datetime.now(timezone.utc)
    task = Task(**data, created_at=now, updated_at=now)
    db.add(task)
    db.flush()
    return task

def apply_changes(task: Task, changes: dict) -> Task:
    """
    Copy already-validated field values onto the task and bump updated_at.
    """
    for field, value in changes.items():
        setattr(task, field, value)
    task.updated_at = datetime.now(timezone.utc)
    return task
