"""
Unit of Work - one session, one transaction, several repositories.

Usage:
    async with UnitOfWork() as uow:
        await uow.tasks.delete_by_project(project_id)
        await uow.projects.delete(project_id)

Everything done through `uow` commits together on clean exit and rolls back
together if the block raises.
"""

from typing import Callable, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.domain.errors import StoreFailureError
from taskboard.infra.db import get_engine
from taskboard.infra.repository import UserRepository, ProjectRepository, TaskRepository

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AsyncSession]


class UnitOfWork:
    """
    Async context manager owning a single session for its lifetime.
    """

    def __init__(self, session_factory: Optional[SessionFactory] = None):
        self._session_factory = session_factory
        self.session: Optional[AsyncSession] = None

    async def __aenter__(self) -> "UnitOfWork":
        factory = self._session_factory or get_engine().session_factory
        self.session = factory()
        self.users = UserRepository(self.session, managed=True)
        self.projects = ProjectRepository(self.session, managed=True)
        self.tasks = TaskRepository(self.session, managed=True)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None:
                await self._commit()
            else:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {e}")
            await self.session.rollback()
            raise StoreFailureError(str(e)) from e


def unit_of_work_factory(session_factory: Optional[SessionFactory] = None) -> Callable[[], UnitOfWork]:
    """Build a zero-argument callable producing units of work on the given sessions"""
    def factory() -> UnitOfWork:
        return UnitOfWork(session_factory)
    return factory
