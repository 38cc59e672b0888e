#tasktracker/models/user.py
from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, Index, func
from tasktracker.models.base import Base
from tasktracker.models.enums import UserRole

class User(Base):
    """
    User: an account with a single role (lead or team_member).
    """
    __tablename__ = "users"

    id: int = Column(Integer, primary_key=True, index=True)
    name: str = Column(String(255), nullable=False, doc="Display name")
    email: str = Column(String(255), unique=True, nullable=False, index=True, doc="Login email")
    password_hash: str = Column(Text, nullable=False, doc="Password hash, never the raw password")
    role: str = Column(String(20), nullable=False, default=UserRole.TEAM_MEMBER.value, doc="lead | team_member")
    created_at: datetime = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: datetime = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_users_role", "role"),
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"
