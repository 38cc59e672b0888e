# tasktracker/services/activity_log_service.py
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from tasktracker.core import permissions
from tasktracker.core.entities import EntityRef
from tasktracker.core.exceptions import ActivityLogValidationError
from tasktracker.crud import activity_log as log_store
from tasktracker.crud.filters import Predicates, resolve_limit
from tasktracker.models.activity_log import ActivityLog
from tasktracker.models.enums import EntityType, LogAction, values_of
from tasktracker.models.user import User

logger = logging.getLogger("TaskTracker.ActivityLogs")


def record(db: Session, actor_id: int, ref: EntityRef, action: LogAction, details: Optional[Dict[str, Any]] = None) -> ActivityLog:
    """
    Stage one log entry in the caller's transaction. The caller commits it
    together with the mutation it describes.
    """
    entry = log_store.add_log(
        db,
        entity_type=ref.entity_type.value,
        entity_id=ref.id,
        action=LogAction(action).value,
        user_id=actor_id,
        details=details,
    )
    logger.debug(f"Logged {entry.action} on {entry.entity_type} {entry.entity_id} by user {actor_id}")
    return entry


def _checked(value: Optional[str], enum_cls, label: str) -> Optional[str]:
    if value is None:
        return None
    if value not in values_of(enum_cls):
        raise ActivityLogValidationError(
            f"Invalid {label}: {value!r}",
            details={"allowed": values_of(enum_cls)},
        )
    return value

def list_logs(
    db: Session,
    actor: User,
    entity_type: Optional[str] = None,
    action: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Newest log entries visible to the actor. Team members only see entries
    they authored; leads see everything.
    """
    predicates = Predicates()
    if not permissions.is_lead(actor):
        predicates.add(ActivityLog.user_id == actor.id)
    predicates.add_eq(ActivityLog.entity_type, _checked(entity_type, EntityType, "entity type"))
    predicates.add_eq(ActivityLog.action, _checked(action, LogAction, "action"))

    rows = log_store.get_logs(db, predicates, limit=resolve_limit(limit))
    return [_present(entry, task_title, user_name) for entry, task_title, user_name in rows]


def _present(entry: ActivityLog, task_title: Optional[str], user_name: Optional[str]) -> Dict[str, Any]:
    ref = entry.entity
    label = task_title if ref.entity_type is EntityType.TASK else user_name
    actor = entry.user
    return {
        "id": entry.id,
        "entity_type": entry.entity_type,
        "entity_id": entry.entity_id,
        "action": entry.action,
        "user_id": entry.user_id,
        "details": entry.details or {},
        "created_at": entry.created_at,
        "user": {"id": actor.id, "name": actor.name, "email": actor.email} if actor else None,
        "entity": {"type": ref.entity_type.value, "id": ref.id, "label": label},
    }
