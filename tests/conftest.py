"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskboard.i18n import set_language
from taskboard.infra.db import Base
from taskboard.infra.unit_of_work import unit_of_work_factory
from taskboard.services import ProjectService, TaskService, UserService

# Lowest cost bcrypt accepts, keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


@pytest_asyncio.fixture
async def db_engine():
    """Create an in-memory SQLite database for testing"""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the test database"""
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new session for a test"""
    async with session_factory() as session:
        yield session


@pytest.fixture
def uow_factory(session_factory):
    """Units of work running against the test database"""
    return unit_of_work_factory(session_factory)


@pytest.fixture
def user_service(uow_factory):
    return UserService(uow_factory, bcrypt_rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def project_service(uow_factory):
    return ProjectService(uow_factory)


@pytest.fixture
def task_service(uow_factory):
    return TaskService(uow_factory)


@pytest_asyncio.fixture
async def alice(user_service):
    return await user_service.register("alice@example.com", "Alice", "alice-password")


@pytest_asyncio.fixture
async def bob(user_service):
    return await user_service.register("bob@example.com", "Bob", "bob-password")


@pytest.fixture(autouse=True)
def english_messages():
    """Every test starts (and ends) with English messages"""
    set_language("en")
    yield
    set_language("en")
