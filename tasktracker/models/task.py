#tasktracker/models/task.py
from datetime import datetime, date
from sqlalchemy import (
    Column, Integer, String, Text, Date, DateTime, ForeignKey, Index, func
)
from sqlalchemy.orm import relationship
from tasktracker.models.base import Base
from tasktracker.models.enums import TaskStatus

TITLE_MAX_LENGTH = 255

class Task(Base):
    """
    Task: created by a lead, optionally assigned to one team member.
    """
    __tablename__ = "tasks"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    title: str = Column(String(TITLE_MAX_LENGTH), nullable=False)
    description: str = Column(Text, nullable=True)
    status: str = Column(String(20), nullable=False, default=TaskStatus.NOT_STARTED.value,
                         doc="not_started, in_progress, done, rejected")
    created_by_id: int = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    assigned_to_id: int = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    due_date: date = Column(Date, nullable=True)
    created_at: datetime = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: datetime = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    created_by = relationship("User", foreign_keys=[created_by_id], backref="created_tasks")
    assigned_to = relationship("User", foreign_keys=[assigned_to_id], backref="assigned_tasks")

    __table_args__ = (
        Index("ix_tasks_status", "status"),
        Index("ix_tasks_created_at", "created_at"),
    )

    def __repr__(self):
        return (
            f"<Task(id={self.id}, title='{self.title}', status={self.status}, "
            f"created_by_id={self.created_by_id}, assigned_to_id={self.assigned_to_id})>"
        )
