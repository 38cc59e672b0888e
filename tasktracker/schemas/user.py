#tasktracker/schemas/user.py
from pydantic import BaseModel, ConfigDict, Field, EmailStr, field_validator
from typing import Optional
from datetime import datetime

from tasktracker.models.enums import UserRole

class UserCreate(BaseModel):
    """
    UserCreate: registration payload.
    """
    name: str = Field(..., min_length=2, max_length=255, examples=["Alice Member"])
    email: EmailStr = Field(..., examples=["alice@example.com"])
    password: str = Field(..., min_length=8, examples=["StrongPassw0rd!"])
    role: UserRole = Field(UserRole.TEAM_MEMBER, description="lead | team_member")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Name must be at least 2 characters")
        return v

class UserSummary(BaseModel):
    """
    Identity summary embedded in tasks.
    """
    id: int
    name: str
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)

class UserBrief(BaseModel):
    """
    Actor summary embedded in activity log entries.
    """
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)

class UserRead(UserSummary):
    created_at: Optional[datetime] = None
