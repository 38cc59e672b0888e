#tasktracker/crud/activity_log.py
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from sqlalchemy import and_
from sqlalchemy.orm import Session, aliased, joinedload
from tasktracker.crud.filters import Predicates, apply
from tasktracker.models.activity_log import ActivityLog
from tasktracker.models.enums import EntityType
from tasktracker.models.task import Task
from tasktracker.models.user import User

def add_log(db: Session, entity_type: str, entity_id: int, action: str, user_id: int, details: Optional[dict] = None) -> ActivityLog:
    """
    Stage one audit entry. Entries are only ever inserted, never updated.
    """
    entry = ActivityLog(
        entity_type=entity_type,
        entity_id=entity_id,
        action=action,
        user_id=user_id,
        details=details or {},
        created_at=datetime.now(timezone.utc),
    )
    db.add(entry)
    db.flush()
    return entry

def get_logs(
    db: Session,
    predicates: Optional[Predicates] = None,
    limit: Optional[int] = None,
) -> List[Tuple[ActivityLog, Optional[str], Optional[str]]]:
    """
    Log entries newest first, each with the title of the referenced task or
    the name of the referenced user (whichever the entity type points at).
    """
    EntityUser = aliased(User)
    query = (
        db.query(ActivityLog, Task.title, EntityUser.name)
        .options(joinedload(ActivityLog.user))
        .outerjoin(Task, and_(
            ActivityLog.entity_type == EntityType.TASK.value,
            Task.id == ActivityLog.entity_id,
        ))
        .outerjoin(EntityUser, and_(
            ActivityLog.entity_type == EntityType.USER.value,
            EntityUser.id == ActivityLog.entity_id,
        ))
    )
    query = apply(query, predicates)
    query = query.order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
    if limit is not None:
        query = query.limit(limit)
    return [(entry, task_title, user_name) for entry, task_title, user_name in query.all()]

def get_logs_for_entity(db: Session, entity_type: str, entity_id: int) -> List[ActivityLog]:
    return (
        db.query(ActivityLog)
        .filter(and_(ActivityLog.entity_type == entity_type, ActivityLog.entity_id == entity_id))
        .order_by(ActivityLog.created_at.asc(), ActivityLog.id.asc())
        .all()
    )
