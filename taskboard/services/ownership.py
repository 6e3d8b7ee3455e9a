"""
Ownership Resolver - decides whether a user may act on a project or task.

Ownership is transitive: Task -> Project -> User. Tasks never store their
owner, so the chain is walked again on every call.

Note the deliberate asymmetry:
- a project owned by someone else is reported as NotFound (its existence
  is not revealed)
- a task inside someone else's project is reported as Forbidden (its
  existence is revealed)
"""

import logging

from taskboard.domain.errors import ForbiddenError, NotFoundError
from taskboard.domain.models import Project, Task
from taskboard.infra.repository import ProjectRepository, TaskRepository

logger = logging.getLogger(__name__)


class OwnershipResolver:
    """Single source of truth for project/task access checks."""

    def __init__(self, project_repo: ProjectRepository, task_repo: TaskRepository):
        self.project_repo = project_repo
        self.task_repo = task_repo

    @classmethod
    def for_unit_of_work(cls, uow) -> "OwnershipResolver":
        """Resolver reading through the repositories of an open unit of work"""
        return cls(uow.projects, uow.tasks)

    async def authorize_project_access(self, user_id: str, project_id: str) -> Project:
        """
        Fetch a project the user owns.

        Raises:
            NotFoundError: project absent or owned by another user
        """
        project = await self.project_repo.get_by_id(project_id)
        if project is None or project.owner_id != user_id:
            if project is not None:
                logger.warning(f"User {user_id} denied access to project {project_id}")
            raise NotFoundError(f"project {project_id}", message_key="project.not_found")
        return project

    async def authorize_task_access(self, user_id: str, task_id: str) -> Task:
        """
        Fetch a task whose project the user owns.

        Raises:
            NotFoundError: task absent
            ForbiddenError: task exists but its project belongs to another user
        """
        task = await self.task_repo.get_by_id(task_id)
        if task is None:
            raise NotFoundError(f"task {task_id}", message_key="task.not_found")

        project = await self.project_repo.get_by_id(task.project_id)
        if project is None or project.owner_id != user_id:
            logger.warning(f"User {user_id} denied access to task {task_id}")
            raise ForbiddenError(f"task {task_id}", message_key="task.forbidden")
        return task
