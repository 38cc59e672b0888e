#tasktracker/models/base.py
"""
Declarative base shared by every ORM model:
    from tasktracker.models.base import Base
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
