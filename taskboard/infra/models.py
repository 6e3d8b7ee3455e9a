"""
SQLAlchemy ORM models.
Separated from db.py for cleaner imports.
"""

from .db import UserModel, ProjectModel, TaskModel, Base

__all__ = ["UserModel", "ProjectModel", "TaskModel", "Base"]
