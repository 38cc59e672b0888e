# tasktracker/services/task_service.py
"""
Task operations on behalf of an explicit actor.

Every operation checks permissions and validates input before touching the
database. A mutation and its activity log entry are committed together.
"""
import logging
from datetime import date
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tasktracker.core import permissions
from tasktracker.core.entities import TaskRef
from tasktracker.core.exceptions import (
    ForbiddenError,
    InternalError,
    TaskNotFound,
    TaskValidationError,
    UserNotFound,
)
from tasktracker.crud import task as task_store
from tasktracker.crud import user as user_store
from tasktracker.crud.filters import Predicates, resolve_limit
from tasktracker.models.enums import LogAction, TaskStatus, UserRole, values_of
from tasktracker.models.task import Task, TITLE_MAX_LENGTH
from tasktracker.models.user import User
from tasktracker.services import activity_log_service

logger = logging.getLogger("TaskTracker.Tasks")

NO_VALID_UPDATES = "No valid updates provided"


def _clean_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise TaskValidationError("Task title is required")
    title = title.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise TaskValidationError(f"Task title must be at most {TITLE_MAX_LENGTH} characters")
    return title


def _clean_status(value: Any) -> str:
    if isinstance(value, TaskStatus):
        return value.value
    if value not in values_of(TaskStatus):
        raise TaskValidationError(
            f"Invalid status value: {value!r}",
            details={"allowed": values_of(TaskStatus)},
        )
    return value


def _clean_due_date(value: Any) -> Optional[date]:
    if value is None or isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise TaskValidationError("Invalid due date format. Use YYYY-MM-DD.")


def _resolve_assignee(db: Session, assignee_id: Optional[int]) -> Optional[User]:
    """
    An assignee must exist (else 404) and be a team member (else 400).
    """
    if assignee_id is None:
        return None
    assignee = user_store.get_user(db, assignee_id)
    if assignee is None:
        raise UserNotFound("Assigned user not found")
    if assignee.role != UserRole.TEAM_MEMBER.value:
        raise TaskValidationError("Only team members can be assigned to tasks")
    return assignee


def _scope(actor: User) -> Predicates:
    """Leads see what they created, everyone else what is assigned to them."""
    predicates = Predicates()
    if permissions.is_lead(actor):
        predicates.add(Task.created_by_id == actor.id)
    else:
        predicates.add(Task.assigned_to_id == actor.id)
    return predicates


def _commit(db: Session, what: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {what}: {e}", exc_info=True)
        raise InternalError(f"Database error while trying to {what}")


def _load_task(db: Session, task_id: int) -> Task:
    task = task_store.get_task(db, task_id)
    if task is None:
        raise TaskNotFound(f"Task {task_id} not found")
    return task


def create_task(db: Session, actor: User, data: Dict[str, Any]) -> Task:
    """
    Create a task owned by the acting lead, status not_started.
    """
    if not permissions.can_create_task(actor):
        raise ForbiddenError("Only leads can create tasks")

    title = _clean_title(data.get("title"))
    description = data.get("description")
    assigned_to_id = data.get("assigned_to_id")
    _resolve_assignee(db, assigned_to_id)
    due_date = _clean_due_date(data.get("due_date"))

    try:
        task = task_store.add_task(db, {
            "title": title,
            "description": description,
            "status": TaskStatus.NOT_STARTED.value,
            "created_by_id": actor.id,
            "assigned_to_id": assigned_to_id,
            "due_date": due_date,
        })
        activity_log_service.record(
            db, actor.id, TaskRef(task.id), LogAction.CREATED,
            {"title": title, "assigned_to_id": assigned_to_id},
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create task: {e}", exc_info=True)
        raise InternalError("Database error while creating task")
    _commit(db, "create task")

    logger.info(f"User {actor.id} created task {task.id}")
    return _load_task(db, task.id)


def get_task(db: Session, actor: User, task_id: int) -> Task:
    task = _load_task(db, task_id)
    if not permissions.can_view_task(actor, task):
        raise ForbiddenError("You do not have permission to view this task")
    return task


def list_tasks(db: Session, actor: User, status: Optional[str] = None, limit: Optional[int] = None):
    """
    Tasks in the actor's scope, optionally with one status, newest first.
    """
    predicates = _scope(actor)
    if status is not None:
        predicates.add(Task.status == _clean_status(status))
    return task_store.get_tasks(db, predicates, limit=resolve_limit(limit))


def summarize_tasks(db: Session, actor: User) -> Dict[str, int]:
    counts = task_store.count_tasks_by_status(db, _scope(actor))
    summary = {status: counts.get(status, 0) for status in values_of(TaskStatus)}
    summary["total"] = sum(summary.values())
    return summary


def _jsonable(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    return value


def _changed_fields(db: Session, task: Task, patch: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate the permitted patch values and keep those that differ from the
    current row.
    """
    changes: Dict[str, Any] = {}
    for field, value in patch.items():
        if field == "title":
            value = _clean_title(value)
        elif field == "status":
            if value is None:
                raise TaskValidationError("Status cannot be null")
            value = _clean_status(value)
        elif field == "assigned_to_id":
            if value != task.assigned_to_id:
                _resolve_assignee(db, value)
        elif field == "due_date":
            value = _clean_due_date(value)
        if getattr(task, field) != value:
            changes[field] = value
    return changes


def _audit_entry(task: Task, changes: Dict[str, Any]):
    """
    Pick the log action (assigned > status_changed > updated) and build the
    details for every change in the patch.
    """
    details: Dict[str, Any] = {}
    action = LogAction.UPDATED
    other = {}
    for field, value in changes.items():
        if field in ("assigned_to_id", "status"):
            continue
        other[field] = [_jsonable(getattr(task, field)), _jsonable(value)]
    if other:
        details["changes"] = other
    if "status" in changes:
        action = LogAction.STATUS_CHANGED
        details["previous_status"] = task.status
        details["new_status"] = changes["status"]
    if "assigned_to_id" in changes:
        action = LogAction.ASSIGNED
        details["previous_assignee"] = task.assigned_to_id
        details["new_assignee"] = changes["assigned_to_id"]
    return action, details


def update_task(db: Session, actor: User, task_id: int, patch: Dict[str, Any]) -> Task:
    """
    Apply the part of `patch` the actor may change.

    Keys outside the actor's mutable fields are ignored; values equal to the
    current ones are dropped. If nothing is left the update is rejected.
    """
    task = _load_task(db, task_id)
    if not permissions.can_mutate_task(actor, task):
        raise ForbiddenError("You do not have permission to update this task")

    allowed = permissions.fields_mutable_by(actor, task)
    ignored = sorted(set(patch) - allowed)
    if ignored:
        logger.debug(f"Ignoring fields {ignored} from user {actor.id} on task {task_id}")
    permitted = {k: v for k, v in patch.items() if k in allowed}

    changes = _changed_fields(db, task, permitted)
    if not changes:
        raise TaskValidationError(NO_VALID_UPDATES)

    action, details = _audit_entry(task, changes)
    try:
        task_store.apply_changes(task, changes)
        activity_log_service.record(db, actor.id, TaskRef(task.id), action, details)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to update task {task_id}: {e}", exc_info=True)
        raise InternalError("Database error while updating task")
    _commit(db, f"update task {task_id}")

    logger.info(f"User {actor.id} updated task {task_id} ({action.value}): {sorted(changes)}")
    db.expire(task, ["created_by", "assigned_to"])
    return _load_task(db, task_id)
