"""
Data Seeder for Taskboard.
Creates a demo user with a couple of projects and tasks, for testing and
demo purposes. Safe to run repeatedly: an existing demo user is reused.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskboard.domain.errors import ConflictError
from taskboard.infra.db import DatabaseEngine, init_db
from taskboard.logging_setup import setup_logging
from taskboard.services import ProjectService, TaskService, UserService

DEMO_EMAIL = "test@test.com"
DEMO_NAME = "Test User"
DEMO_PASSWORD = "test1234"

DEMO_PROJECTS = {
    "Alpha": ["write docs", "review schema", "set up CI"],
    "Home": ["buy groceries", "call the plumber"],
}


async def seed():
    setup_logging()
    print("Starting data seeding...")

    # Initialize DB (creates tables if needed)
    await init_db()

    users = UserService()
    projects = ProjectService()
    tasks = TaskService()

    # 1. Demo user
    try:
        user = await users.register(DEMO_EMAIL, DEMO_NAME, DEMO_PASSWORD)
        print(f"Created user: {DEMO_EMAIL}")
    except ConflictError:
        user = await users.authenticate(DEMO_EMAIL, DEMO_PASSWORD)
        print(f"User exists: {DEMO_EMAIL}")

    # 2. Projects and tasks
    existing_names = {p.name for p in await projects.list_projects(user.id)}
    for project_name, titles in DEMO_PROJECTS.items():
        if project_name in existing_names:
            print(f"Project exists: {project_name}")
            continue

        print(f"Creating project: {project_name}")
        project = await projects.create_project(user.id, project_name)
        for title in titles:
            await tasks.create_task(user.id, project.id, title)

        # Mark the first task done so the demo shows both states
        first = (await tasks.list_tasks(user.id, project.id))[-1]
        await tasks.update_task(user.id, first.id)

    print(f"Seeding complete. Login: {DEMO_EMAIL} / {DEMO_PASSWORD}")


async def main():
    try:
        await seed()
    finally:
        await DatabaseEngine.reset()


if __name__ == "__main__":
    asyncio.run(main())
