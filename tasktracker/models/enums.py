#tasktracker/models/enums.py
import enum


class UserRole(str, enum.Enum):
    LEAD = "lead"
    TEAM_MEMBER = "team_member"


class TaskStatus(str, enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    REJECTED = "rejected"


class LogAction(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    STATUS_CHANGED = "status_changed"
    ASSIGNED = "assigned"


class EntityType(str, enum.Enum):
    USER = "user"
    TASK = "task"


def values_of(enum_cls) -> list:
    return [member.value for member in enum_cls]
