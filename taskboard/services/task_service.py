"""
Task Service - CRUD on tasks, scoped through the parent project's owner.

The update operation has two modes:
- no recognized field in the patch (or no patch at all): toggle `completed`
- at least one field present: apply exactly the present fields
Clients that want an exact completion state must send `completed`.
"""

from typing import Any, Callable, List, Optional
import logging

from taskboard.domain.errors import InvalidInputError
from taskboard.domain.models import Task, TaskPatch
from taskboard.infra.unit_of_work import UnitOfWork
from taskboard.services.ownership import OwnershipResolver
from taskboard.utils import clean_text

logger = logging.getLogger(__name__)


class TaskService:
    """
    Task operations for an authenticated user.
    """

    def __init__(self, uow_factory: Optional[Callable[[], UnitOfWork]] = None):
        self._uow = uow_factory or UnitOfWork

    async def list_tasks(self, user_id: str, project_id: Optional[str]) -> List[Task]:
        """
        All tasks of one of the user's projects, newest first.

        Raises:
            InvalidInputError: project_id missing
            NotFoundError: project absent or not owned by the user
        """
        if not project_id:
            raise InvalidInputError("project_id is required", message_key="task.project_required")

        async with self._uow() as uow:
            await OwnershipResolver.for_unit_of_work(uow).authorize_project_access(user_id, project_id)
            return await uow.tasks.find_by_project(project_id)

    async def create_task(self, user_id: str, project_id: Optional[str], title: Optional[str]) -> Task:
        """
        Create an open task in one of the user's projects.

        Raises:
            InvalidInputError: project_id missing or title empty after trimming
            NotFoundError: project absent or not owned by the user
        """
        title = clean_text(title)
        if not project_id or not title:
            raise InvalidInputError("project_id and title are required", message_key="task.fields_required")

        async with self._uow() as uow:
            await OwnershipResolver.for_unit_of_work(uow).authorize_project_access(user_id, project_id)
            task = await uow.tasks.create(title, project_id)
        logger.info(f"Task {task.id} created in project {project_id} by user {user_id}")
        return task

    async def update_task(self, user_id: str, task_id: str, patch: Any = None) -> Task:
        """
        Toggle or partially update a task.

        Args:
            user_id: Acting user
            task_id: Task to update
            patch: None, a TaskPatch, or a raw mapping (request body)

        Returns:
            The task after the update

        Raises:
            InvalidInputError: malformed patch, empty title or null completed
            NotFoundError: task absent
            ForbiddenError: task belongs to another user's project
        """
        patch = TaskPatch.from_body(patch)

        async with self._uow() as uow:
            task = await OwnershipResolver.for_unit_of_work(uow).authorize_task_access(user_id, task_id)

            if patch.is_toggle:
                updated = await uow.tasks.update(task.id, completed=not task.completed)
                logger.info(f"Task {task_id} toggled to completed={updated.completed} by user {user_id}")
                return updated

            title = None
            if patch.has_title:
                title = clean_text(patch.title)
                if not title:
                    raise InvalidInputError("title is empty", message_key="task.empty_title")

            completed = None
            if patch.has_completed:
                if patch.completed is None:
                    raise InvalidInputError("completed is null", message_key="task.invalid_completed")
                completed = patch.completed

            updated = await uow.tasks.update(task.id, title=title, completed=completed)
        logger.info(f"Task {task_id} updated by user {user_id}")
        return updated

    async def delete_task(self, user_id: str, task_id: str) -> None:
        """
        Delete a single task.

        Raises:
            NotFoundError: task absent
            ForbiddenError: task belongs to another user's project
        """
        async with self._uow() as uow:
            await OwnershipResolver.for_unit_of_work(uow).authorize_task_access(user_id, task_id)
            await uow.tasks.delete(task_id)
        logger.info(f"Task {task_id} deleted by user {user_id}")
