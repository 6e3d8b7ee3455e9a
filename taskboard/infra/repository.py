"""
Repository Pattern Implementation.

Architecture Decision: Why Repository Pattern?
Separates data access logic from business logic. Makes it easy to:
- Switch database implementations
- Run several repositories inside one transaction (see unit_of_work.py)
- Mock data for testing

Repositories never raise for "not found": lookups return None. Store
problems surface as ConflictError (unique constraint) or StoreFailureError.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional
import logging

from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.errors import ConflictError, StoreFailureError
from taskboard.domain.models import User, UserRecord, Project, Task
from taskboard.infra.db import UserModel, ProjectModel, TaskModel, get_engine

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Session handling shared by all repositories.

    Three modes:
    - no session: a fresh session per call, committed at the end
    - injected session: used as-is, committed at the end of each call
    - managed (inside a UnitOfWork): only flushed, the unit of work commits
    """

    def __init__(self, session: Optional[AsyncSession] = None, managed: bool = False):
        self.session = session
        self.managed = managed

    @asynccontextmanager
    async def _scope(self) -> AsyncIterator[AsyncSession]:
        """Yield a session and translate SQLAlchemy errors into store errors"""
        owns_session = self.session is None
        session = get_engine().get_session() if owns_session else self.session
        try:
            yield session
        except IntegrityError as e:
            if not self.managed:
                await session.rollback()
            logger.warning(f"Constraint violation in {type(self).__name__}: {e.orig}")
            raise ConflictError(str(e.orig)) from e
        except SQLAlchemyError as e:
            if not self.managed:
                await session.rollback()
            logger.error(f"Store failure in {type(self).__name__}: {e}")
            raise StoreFailureError(str(e)) from e
        finally:
            if owns_session:
                await session.close()

    async def _save(self, session: AsyncSession) -> None:
        """Commit, or just flush when a unit of work owns the transaction"""
        if self.managed:
            await session.flush()
        else:
            await session.commit()


class UserRepository(BaseRepository):
    """
    Handles User persistence.
    """

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID"""
        async with self._scope() as session:
            model = await session.get(UserModel, user_id)
            return User.model_validate(model) if model else None

    async def get_by_email(self, email: str) -> Optional[UserRecord]:
        """Get a user by email, credential included"""
        async with self._scope() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.email == email)
            )
            model = result.scalar_one_or_none()
            return UserRecord.model_validate(model) if model else None

    async def create(self, email: str, name: str, password_hash: str) -> User:
        """Create a new user. Raises ConflictError if the email exists."""
        async with self._scope() as session:
            model = UserModel(email=email, name=name, password_hash=password_hash)
            session.add(model)
            await self._save(session)
            await session.refresh(model)
            return User.model_validate(model)


class ProjectRepository(BaseRepository):
    """
    Handles all Project-related database operations.

    Converts between domain models (Pydantic) and ORM models (SQLAlchemy).
    """

    async def find_by_owner(self, owner_id: str) -> List[Project]:
        """Get all projects of a user, newest first"""
        async with self._scope() as session:
            result = await session.execute(
                select(ProjectModel)
                .where(ProjectModel.owner_id == owner_id)
                .order_by(ProjectModel.created_at.desc(), ProjectModel.seq.desc())
            )
            return [Project.model_validate(m) for m in result.scalars().all()]

    async def get_by_id(self, project_id: str) -> Optional[Project]:
        """Get a specific project by ID"""
        async with self._scope() as session:
            model = await session.get(ProjectModel, project_id)
            return Project.model_validate(model) if model else None

    async def create(self, name: str, owner_id: str) -> Project:
        """Create a new project"""
        async with self._scope() as session:
            model = ProjectModel(name=name, owner_id=owner_id)
            session.add(model)
            await self._save(session)
            await session.refresh(model)
            return Project.model_validate(model)

    async def update_name(self, project_id: str, name: str) -> Optional[Project]:
        """Rename a project. Returns None if it does not exist."""
        async with self._scope() as session:
            model = await session.get(ProjectModel, project_id)
            if model is None:
                return None
            model.name = name
            await self._save(session)
            return Project.model_validate(model)

    async def delete(self, project_id: str) -> None:
        """Delete a project row (tasks must be gone already)"""
        async with self._scope() as session:
            await session.execute(
                delete(ProjectModel).where(ProjectModel.id == project_id)
            )
            await self._save(session)


class TaskRepository(BaseRepository):
    """
    Handles all Task-related database operations.
    """

    async def find_by_project(self, project_id: str) -> List[Task]:
        """Get all tasks of a project, newest first"""
        async with self._scope() as session:
            result = await session.execute(
                select(TaskModel)
                .where(TaskModel.project_id == project_id)
                .order_by(TaskModel.created_at.desc(), TaskModel.seq.desc())
            )
            return [Task.model_validate(m) for m in result.scalars().all()]

    async def get_by_id(self, task_id: str) -> Optional[Task]:
        """Get a specific task by ID"""
        async with self._scope() as session:
            model = await session.get(TaskModel, task_id)
            return Task.model_validate(model) if model else None

    async def create(self, title: str, project_id: str) -> Task:
        """Create a new, not yet completed task"""
        async with self._scope() as session:
            model = TaskModel(title=title, project_id=project_id, completed=False)
            session.add(model)
            await self._save(session)
            await session.refresh(model)
            return Task.model_validate(model)

    async def update(self, task_id: str, title: Optional[str] = None,
                     completed: Optional[bool] = None) -> Optional[Task]:
        """
        Update the given fields of a task.

        Args:
            task_id: Task to update
            title: New title, or None to keep the current one
            completed: New completion state, or None to keep the current one

        Returns:
            The updated task, or None if it does not exist
        """
        async with self._scope() as session:
            model = await session.get(TaskModel, task_id)
            if model is None:
                return None
            if title is not None:
                model.title = title
            if completed is not None:
                model.completed = completed
            await self._save(session)
            return Task.model_validate(model)

    async def delete(self, task_id: str) -> None:
        """Delete a task by ID"""
        async with self._scope() as session:
            await session.execute(
                delete(TaskModel).where(TaskModel.id == task_id)
            )
            await self._save(session)

    async def delete_by_project(self, project_id: str) -> int:
        """Delete all tasks of a project. Returns count of deleted rows."""
        async with self._scope() as session:
            result = await session.execute(
                delete(TaskModel).where(TaskModel.project_id == project_id)
            )
            await self._save(session)
            return result.rowcount
