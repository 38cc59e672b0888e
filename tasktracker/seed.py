# tasktracker/seed.py
"""
Reset the database to a small demo data set:

    python -m tasktracker.seed

Purges activity logs, tasks and users, then creates one lead, the configured
team members and a few tasks with their audit entries.
"""

import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from tasktracker.core.entities import TaskRef
from tasktracker.core.settings import settings
from tasktracker.crud import task as task_store
from tasktracker.database import SessionLocal, init_db
from tasktracker.models.activity_log import ActivityLog
from tasktracker.models.enums import LogAction, TaskStatus, UserRole
from tasktracker.models.task import Task
from tasktracker.models.user import User
from tasktracker.services import activity_log_service, user_service

logger = logging.getLogger("TaskTracker.Seed")

SAMPLE_TASKS = [
    ("Create project documentation",
     "Write documentation covering setup instructions and API endpoints.",
     TaskStatus.NOT_STARTED, 0),
    ("Implement user authentication",
     "Set up token authentication with role-based access control.",
     TaskStatus.IN_PROGRESS, 1),
    ("Design database schema",
     "Create the schema for users, tasks and activity logs.",
     TaskStatus.DONE, 0),
    ("Set up CI/CD pipeline",
     "Configure continuous integration and deployment.",
     TaskStatus.NOT_STARTED, None),
]

def purge(db: Session) -> None:
    logger.info("Clearing existing data...")
    db.query(ActivityLog).delete()
    db.query(Task).delete()
    db.query(User).delete()
    db.commit()
    db.expunge_all()

def seed(db: Session) -> dict:
    purge(db)

    lead = user_service.register_user(db, {
        "name": "John Lead",
        "email": settings.SEED_LEAD_EMAIL,
        "password": settings.SEED_PASSWORD,
        "role": UserRole.LEAD,
    })
    members = []
    for email in settings.seed_member_emails:
        members.append(user_service.register_user(db, {
            "name": email.split("@")[0].capitalize() + " Member",
            "email": email,
            "password": settings.SEED_PASSWORD,
            "role": UserRole.TEAM_MEMBER,
        }))

    tasks = []
    for title, description, status, member_index in SAMPLE_TASKS:
        assignee = None
        if member_index is not None and member_index < len(members):
            assignee = members[member_index]
        task = task_store.add_task(db, {
            "title": title,
            "description": description,
            "status": status.value,
            "created_by_id": lead.id,
            "assigned_to_id": assignee.id if assignee else None,
        })
        activity_log_service.record(
            db, lead.id, TaskRef(task.id), LogAction.CREATED,
            {"title": title, "assigned_to_id": task.assigned_to_id},
        )
        if assignee:
            entry = activity_log_service.record(
                db, lead.id, TaskRef(task.id), LogAction.ASSIGNED,
                {"previous_assignee": None, "new_assignee": assignee.id},
            )
            entry.created_at = task.created_at + timedelta(seconds=1)
        tasks.append(task)
    db.commit()

    logger.info(f"Seeded {1 + len(members)} users and {len(tasks)} tasks")
    return {"lead": lead, "members": members, "tasks": tasks}

def main() -> None:
    init_db()
    db = SessionLocal()
    try:
        seed(db)
    finally:
        db.close()
    logger.info("Finished seeding.")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
