"""
Project Service - CRUD on projects, scoped to the acting user.

Every method takes the acting user's id explicitly; there is no ambient
"current user". Each call runs in its own unit of work.
"""

from typing import Callable, List, Optional
import logging

from taskboard.domain.errors import InvalidInputError
from taskboard.domain.models import Project
from taskboard.infra.unit_of_work import UnitOfWork
from taskboard.services.ownership import OwnershipResolver
from taskboard.utils import clean_text

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Project operations for an authenticated user.
    """

    def __init__(self, uow_factory: Optional[Callable[[], UnitOfWork]] = None):
        self._uow = uow_factory or UnitOfWork

    async def list_projects(self, user_id: str) -> List[Project]:
        """All projects owned by the user, newest first"""
        async with self._uow() as uow:
            return await uow.projects.find_by_owner(user_id)

    async def create_project(self, user_id: str, name: Optional[str]) -> Project:
        """
        Create a project owned by the user.

        Raises:
            InvalidInputError: name empty after trimming
        """
        name = self._validate_name(name)
        async with self._uow() as uow:
            project = await uow.projects.create(name, user_id)
        logger.info(f"Project {project.id} created by user {user_id}")
        return project

    async def rename_project(self, user_id: str, project_id: str, name: Optional[str]) -> Project:
        """
        Rename one of the user's projects.

        Raises:
            InvalidInputError: name empty after trimming
            NotFoundError: project absent or not owned by the user
        """
        name = self._validate_name(name)
        async with self._uow() as uow:
            await OwnershipResolver.for_unit_of_work(uow).authorize_project_access(user_id, project_id)
            project = await uow.projects.update_name(project_id, name)
        logger.info(f"Project {project_id} renamed by user {user_id}")
        return project

    async def delete_project(self, user_id: str, project_id: str) -> None:
        """
        Delete one of the user's projects together with all its tasks.

        Tasks go first, then the project, in the same transaction: either
        both deletions are committed or neither is.

        Raises:
            NotFoundError: project absent or not owned by the user
        """
        async with self._uow() as uow:
            await OwnershipResolver.for_unit_of_work(uow).authorize_project_access(user_id, project_id)
            removed = await uow.tasks.delete_by_project(project_id)
            await uow.projects.delete(project_id)
        logger.info(f"Project {project_id} deleted by user {user_id} ({removed} tasks)")

    @staticmethod
    def _validate_name(name: Optional[str]) -> str:
        cleaned = clean_text(name)
        if not cleaned:
            raise InvalidInputError("project name is empty", message_key="project.invalid_name")
        return cleaned
