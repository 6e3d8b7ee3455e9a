"""
Tests for the repositories (Entity Store).
"""

import datetime
import pytest
from sqlalchemy import select, func

from taskboard.domain.errors import ConflictError, StoreFailureError
from taskboard.infra.db import ProjectModel, TaskModel
from taskboard.infra.repository import UserRepository, ProjectRepository, TaskRepository


@pytest.fixture
def repos(db_session):
    return (
        UserRepository(session=db_session),
        ProjectRepository(session=db_session),
        TaskRepository(session=db_session),
    )


@pytest.mark.asyncio
async def test_user_lookup_by_id_and_email(repos):
    user_repo, _, _ = repos
    user = await user_repo.create("ana@example.com", "Ana", "hash")

    assert (await user_repo.get_by_id(user.id)).email == "ana@example.com"
    record = await user_repo.get_by_email("ana@example.com")
    assert record.id == user.id
    assert record.password_hash == "hash"
    assert "password_hash" not in record.to_public().model_dump()


@pytest.mark.asyncio
async def test_missing_entities_are_none_not_errors(repos):
    user_repo, project_repo, task_repo = repos

    assert await user_repo.get_by_id("nope") is None
    assert await user_repo.get_by_email("nobody@example.com") is None
    assert await project_repo.get_by_id("nope") is None
    assert await project_repo.update_name("nope", "x") is None
    assert await task_repo.get_by_id("nope") is None
    assert await task_repo.update("nope", completed=True) is None


@pytest.mark.asyncio
async def test_duplicate_email_is_conflict(repos):
    user_repo, _, _ = repos
    await user_repo.create("dup@example.com", "First", "hash")

    with pytest.raises(ConflictError):
        await user_repo.create("dup@example.com", "Second", "hash")

    # The session is still usable after the rollback
    assert (await user_repo.get_by_email("dup@example.com")).name == "First"


@pytest.mark.asyncio
async def test_projects_listed_newest_first_per_owner(repos):
    user_repo, project_repo, _ = repos
    ana = await user_repo.create("ana@example.com", "Ana", "hash")
    dan = await user_repo.create("dan@example.com", "Dan", "hash")

    first = await project_repo.create("First", ana.id)
    second = await project_repo.create("Second", ana.id)
    await project_repo.create("Other", dan.id)

    listed = await project_repo.find_by_owner(ana.id)
    assert [p.id for p in listed] == [second.id, first.id]
    assert all(p.owner_id == ana.id for p in listed)


@pytest.mark.asyncio
async def test_same_timestamp_lists_later_insert_first(repos, db_session):
    user_repo, project_repo, task_repo = repos
    ana = await user_repo.create("ana@example.com", "Ana", "hash")
    stamp = datetime.datetime(2026, 1, 1, 9, 0)

    for name in ("earlier", "later"):
        db_session.add(ProjectModel(name=name, owner_id=ana.id, created_at=stamp))
        await db_session.commit()
    [project] = [p for p in await project_repo.find_by_owner(ana.id) if p.name == "later"]
    for title in ("earlier", "later"):
        db_session.add(TaskModel(title=title, project_id=project.id, created_at=stamp))
        await db_session.commit()

    assert [p.name for p in await project_repo.find_by_owner(ana.id)] == ["later", "earlier"]
    assert [t.title for t in await task_repo.find_by_project(project.id)] == ["later", "earlier"]


@pytest.mark.asyncio
async def test_insertion_order_survives_a_restart(repos, db_session):
    """A row from a previous run (its counter started at 1) still sorts below a new one"""
    user_repo, project_repo, _ = repos
    ana = await user_repo.create("ana@example.com", "Ana", "hash")
    stamp = datetime.datetime(2026, 1, 1, 9, 0)

    db_session.add(ProjectModel(name="previous run", owner_id=ana.id, created_at=stamp, seq=1_000_000))
    await db_session.commit()
    db_session.add(ProjectModel(name="this run", owner_id=ana.id, created_at=stamp))
    await db_session.commit()

    assert [p.name for p in await project_repo.find_by_owner(ana.id)] == ["this run", "previous run"]


@pytest.mark.asyncio
async def test_update_name_keeps_owner(repos):
    user_repo, project_repo, _ = repos
    ana = await user_repo.create("ana@example.com", "Ana", "hash")
    project = await project_repo.create("Old", ana.id)

    renamed = await project_repo.update_name(project.id, "New")

    assert renamed.name == "New"
    assert renamed.owner_id == ana.id
    assert renamed.created_at == project.created_at


@pytest.mark.asyncio
async def test_task_update_changes_only_given_fields(repos):
    user_repo, project_repo, task_repo = repos
    ana = await user_repo.create("ana@example.com", "Ana", "hash")
    project = await project_repo.create("P", ana.id)
    task = await task_repo.create("draft", project.id)
    assert task.completed is False

    done = await task_repo.update(task.id, completed=True)
    assert (done.title, done.completed) == ("draft", True)

    renamed = await task_repo.update(task.id, title="final")
    assert (renamed.title, renamed.completed) == ("final", True)


@pytest.mark.asyncio
async def test_delete_by_project_only_touches_that_project(repos, db_session):
    user_repo, project_repo, task_repo = repos
    ana = await user_repo.create("ana@example.com", "Ana", "hash")
    doomed = await project_repo.create("Doomed", ana.id)
    kept = await project_repo.create("Kept", ana.id)
    for title in ("a", "b", "c"):
        await task_repo.create(title, doomed.id)
    survivor = await task_repo.create("survivor", kept.id)

    removed = await task_repo.delete_by_project(doomed.id)

    assert removed == 3
    assert await task_repo.find_by_project(doomed.id) == []
    assert [t.id for t in await task_repo.find_by_project(kept.id)] == [survivor.id]
    count = await db_session.scalar(select(func.count()).select_from(TaskModel))
    assert count == 1


@pytest.mark.asyncio
async def test_broken_store_raises_store_failure(db_engine, session_factory):
    async with db_engine.begin() as conn:
        await conn.run_sync(TaskModel.__table__.drop)

    async with session_factory() as session:
        with pytest.raises(StoreFailureError):
            await TaskRepository(session=session).find_by_project("any")
