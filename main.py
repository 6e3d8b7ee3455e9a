#!/usr/bin/env python

"""
Taskboard - Database bootstrap entry point

Creates the schema in the configured database and applies the logging and
language settings.

Usage:
    python main.py

Configuration:
    TASKBOARD_DATABASE_URL, TASKBOARD_LANGUAGE, TASKBOARD_LOG_LEVEL, ...
    or config/settings.yaml (see taskboard/infra/config.py)
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from taskboard.i18n import set_language
from taskboard.infra.config import get_settings
from taskboard.infra.db import DatabaseEngine, init_db
from taskboard.logging_setup import setup_logging

logger = logging.getLogger("taskboard")


async def bootstrap() -> str:
    """Apply settings and create tables. Returns the database URL in use."""
    settings = get_settings()
    setup_logging(settings.log_level)
    set_language(settings.language)

    db_url = settings.get_db_url()
    await init_db(db_url)
    logger.info(f"Database ready at {db_url}")
    return db_url


async def _run() -> None:
    try:
        await bootstrap()
    finally:
        await DatabaseEngine.reset()


def main():
    """Main entry point"""
    asyncio.run(_run())
    return 0


if __name__ == "__main__":
    sys.exit(main())
