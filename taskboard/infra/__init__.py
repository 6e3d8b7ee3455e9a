"""Infrastructure layer - Database, persistence and configuration"""

from .db import DatabaseEngine, get_engine, init_db
from .models import UserModel, ProjectModel, TaskModel
from .repository import UserRepository, ProjectRepository, TaskRepository
from .unit_of_work import UnitOfWork, unit_of_work_factory

__all__ = [
    "DatabaseEngine", "get_engine", "init_db",
    "UserModel", "ProjectModel", "TaskModel",
    "UserRepository", "ProjectRepository", "TaskRepository",
    "UnitOfWork", "unit_of_work_factory",
]
