from .user import User
from .task import Task
from .activity_log import ActivityLog
from .enums import UserRole, TaskStatus, LogAction, EntityType
