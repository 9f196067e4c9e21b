"""
Taskboard — In-Memory Task Tracking API
========================================
Create, list, retrieve and complete tasks over a JSON HTTP API.

Architecture:
    TaskStore     — In-memory registry, sole owner of task state
    Validation    — Tagged outcomes for request input
    TaskHandlers  — Request contracts (Create, List, GetById, MarkDone)
    TaskLogger    — Witness that logs every handler action
    Server        — FastAPI wiring (see taskboard.server)
"""

__version__ = "0.1.0"

from taskboard.task_store import Task, TaskStore
from taskboard.validation import (
    Outcome, TaskboardError, ValidationError, NotFoundError,
    validate_title, parse_task_id, require_task_id,
)
from taskboard.handlers import HandlerResponse, TaskHandlers
from taskboard.task_logger import TaskLogger, configure_logging
from taskboard.config import ServerConfig

__all__ = [
    "Task", "TaskStore",
    "Outcome", "TaskboardError", "ValidationError", "NotFoundError",
    "validate_title", "parse_task_id", "require_task_id",
    "HandlerResponse", "TaskHandlers",
    "TaskLogger", "configure_logging",
    "ServerConfig",
]
