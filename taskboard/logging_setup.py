"""
Logging configuration.

Call setup_logging() once, early, from whatever process embeds Taskboard
(a web app, a script). Library modules only create module-level loggers.
"""

import logging
import sys
from typing import Optional, Union


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure the root logger with a single stderr handler.

    Args:
        level: Log level for Taskboard loggers; defaults to settings.log_level
    """
    if level is None:
        from taskboard.infra.config import get_settings
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)

    # SQL statements are logged by echo_sql, not here
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
