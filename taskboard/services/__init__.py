"""Services layer - Business logic"""

from .ownership import OwnershipResolver
from .project_service import ProjectService
from .task_service import TaskService
from .user_service import UserService

__all__ = ["OwnershipResolver", "ProjectService", "TaskService", "UserService"]
