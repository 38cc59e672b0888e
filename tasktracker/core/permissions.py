# tasktracker/core/permissions.py
"""
Who may see and change what. Pure functions of (user, task): no database
access and no side effects. Services turn a False into ForbiddenError.
"""
from typing import FrozenSet

from tasktracker.models.enums import UserRole

LEAD_MUTABLE_FIELDS: FrozenSet[str] = frozenset(
    {"title", "description", "status", "assigned_to_id", "due_date"}
)
ASSIGNEE_MUTABLE_FIELDS: FrozenSet[str] = frozenset({"status"})


def is_lead(user) -> bool:
    return user.role == UserRole.LEAD.value


def is_creator(user, task) -> bool:
    return is_lead(user) and task.created_by_id == user.id


def is_assignee(user, task) -> bool:
    return task.assigned_to_id is not None and task.assigned_to_id == user.id


def can_create_task(user) -> bool:
    return is_lead(user)


def can_view_task(user, task) -> bool:
    # Leads see the tasks they created, same scope as the task list.
    return is_creator(user, task) or is_assignee(user, task)


def can_mutate_task(user, task) -> bool:
    return is_creator(user, task) or is_assignee(user, task)


def fields_mutable_by(user, task) -> FrozenSet[str]:
    if is_creator(user, task):
        return LEAD_MUTABLE_FIELDS
    if is_assignee(user, task):
        return ASSIGNEE_MUTABLE_FIELDS
    return frozenset()


def can_list_users(user) -> bool:
    return is_lead(user)
