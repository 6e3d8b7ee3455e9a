"""
Tests for the UnitOfWork transaction scope.
"""

import pytest
from sqlalchemy.exc import OperationalError

from taskboard.domain.errors import ConflictError, StoreFailureError


@pytest.mark.asyncio
async def test_changes_commit_on_clean_exit(uow_factory, alice):
    async with uow_factory() as uow:
        project = await uow.projects.create("Committed", alice.id)
        await uow.tasks.create("inside", project.id)

    async with uow_factory() as uow:
        assert (await uow.projects.get_by_id(project.id)).name == "Committed"
        assert len(await uow.tasks.find_by_project(project.id)) == 1


@pytest.mark.asyncio
async def test_changes_roll_back_when_block_raises(uow_factory, alice):
    project_ids = []

    with pytest.raises(RuntimeError):
        async with uow_factory() as uow:
            project = await uow.projects.create("Doomed", alice.id)
            project_ids.append(project.id)
            await uow.tasks.create("never saved", project.id)
            raise RuntimeError("boom")

    async with uow_factory() as uow:
        assert await uow.projects.get_by_id(project_ids[0]) is None
        assert await uow.tasks.find_by_project(project_ids[0]) == []


@pytest.mark.asyncio
async def test_conflict_inside_unit_of_work_rolls_back_everything(uow_factory, alice):
    with pytest.raises(ConflictError):
        async with uow_factory() as uow:
            await uow.projects.create("Lost", alice.id)
            await uow.users.create(alice.email, "Clone", "hash")

    async with uow_factory() as uow:
        assert await uow.projects.find_by_owner(alice.id) == []


@pytest.mark.asyncio
async def test_failed_commit_is_store_failure_and_persists_nothing(uow_factory, alice, monkeypatch):
    project_ids = []

    async def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    with pytest.raises(StoreFailureError):
        async with uow_factory() as uow:
            project = await uow.projects.create("Unlucky", alice.id)
            project_ids.append(project.id)
            monkeypatch.setattr(uow.session, "commit", failing_commit)

    async with uow_factory() as uow:
        assert await uow.projects.get_by_id(project_ids[0]) is None
