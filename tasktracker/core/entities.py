# tasktracker/core/entities.py
"""
Typed references to the entities an activity log entry can point at.

The table stores a loose ``(entity_type, entity_id)`` pair; in the
application it is always one of ``TaskRef`` or ``UserRef``.
"""
from dataclasses import dataclass
from typing import ClassVar, Union

from tasktracker.core.exceptions import ActivityLogValidationError
from tasktracker.models.enums import EntityType


@dataclass(frozen=True)
class TaskRef:
    id: int
    entity_type: ClassVar[EntityType] = EntityType.TASK


@dataclass(frozen=True)
class UserRef:
    id: int
    entity_type: ClassVar[EntityType] = EntityType.USER


EntityRef = Union[TaskRef, UserRef]

_REF_BY_TYPE = {
    EntityType.TASK: TaskRef,
    EntityType.USER: UserRef,
}


def entity_ref(entity_type, entity_id: int) -> EntityRef:
    """Rebuild a typed reference from the stored columns."""
    try:
        ref_cls = _REF_BY_TYPE[EntityType(entity_type)]
    except ValueError:
        raise ActivityLogValidationError(f"Unknown entity type: {entity_type}")
    return ref_cls(entity_id)
