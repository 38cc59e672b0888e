#tasktracker/models/activity_log.py
from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, DateTime, ForeignKey, JSON, Index, func
)
from sqlalchemy.orm import relationship
from tasktracker.models.base import Base

class ActivityLog(Base):
    """
    ActivityLog: append-only audit entry. (entity_type, entity_id) points at a
    task or a user and is not a foreign key.
    """
    __tablename__ = "activity_logs"

    id: int = Column(Integer, primary_key=True, autoincrement=True)
    entity_type: str = Column(String(20), nullable=False, doc="task | user")
    entity_id: int = Column(Integer, nullable=False)
    action: str = Column(String(20), nullable=False, doc="created, updated, status_changed, assigned")
    user_id: int = Column(Integer, ForeignKey("users.id"), nullable=False, index=True, doc="Actor")
    details: dict = Column(JSON, nullable=False, default=lambda: {})
    created_at: datetime = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    user = relationship("User", backref="activity_logs")

    __table_args__ = (
        Index("ix_activity_logs_entity", "entity_type", "entity_id"),
        Index("ix_activity_logs_created_at", "created_at"),
    )

    @property
    def entity(self):
        from tasktracker.core.entities import entity_ref
        return entity_ref(self.entity_type, self.entity_id)

    def __repr__(self):
        return (
            f"<ActivityLog(id={self.id}, {self.entity_type}#{self.entity_id}, "
            f"action={self.action}, user_id={self.user_id})>"
        )
