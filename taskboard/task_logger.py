"""
TaskLogger — Logs all task operations. Pure observation — never modifies data.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

LOGGER_NAME = "taskboard"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class TaskboardHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging()."""

    def __init__(self, stream=None):
        super().__init__(stream)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach one stream handler to the taskboard logger. Safe to call twice."""
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)

    if not any(isinstance(h, TaskboardHandler) for h in logger.handlers):
        logger.addHandler(TaskboardHandler())
    return logger


class TaskLogger:
    """Witness for handler activity."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(f"{LOGGER_NAME}.handlers")

    def log_action(self, action: str, details: dict[str, Any], level: int = logging.INFO) -> None:
        """Witnesses action — logs without modifying state."""
        payload = json.dumps(details, default=str, sort_keys=True)
        self.logger.log(level, "%s %s", action, payload)

    def log_rejection(self, action: str, status: int, error: str) -> None:
        self.log_action(
            "reject", {"action": action, "status": status, "error": error},
            level=logging.WARNING,
        )
