"""Domain layer - Pure business entities and errors"""

from .errors import (
    TaskboardError,
    InvalidInputError,
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
    StoreFailureError,
    to_response,
)
from .models import User, UserRecord, Project, Task, TaskPatch

__all__ = [
    "TaskboardError", "InvalidInputError", "AuthenticationError", "ForbiddenError",
    "NotFoundError", "ConflictError", "StoreFailureError", "to_response",
    "User", "UserRecord", "Project", "Task", "TaskPatch",
]
