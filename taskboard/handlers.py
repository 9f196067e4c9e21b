"""
Task Handlers — Request Contracts for the Task API
===================================================
Each handler takes the raw request input (body mapping or path segment),
validates it, calls the TaskStore, and returns a HandlerResponse.

Handlers know nothing about the web framework; server.py turns a
HandlerResponse into an HTTP response.

    create(body)          → 201 Task | 400 title error
    list()                → 200 [Task, ...]
    get_by_id(raw_id)     → 200 Task | 404
    mark_done(raw_id)     → 200 Task | 400 id format | 404
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from taskboard.task_logger import TaskLogger
from taskboard.task_store import TaskStore
from taskboard.validation import (
    NotFoundError, TaskboardError,
    parse_task_id, require_task_id, validate_title,
)


@dataclass
class HandlerResponse:
    """Framework-neutral response: HTTP status plus a JSON-able body."""

    status: int
    body: Any

    @classmethod
    def from_error(cls, error: TaskboardError) -> HandlerResponse:
        return cls(status=error.status, body=error.to_dict())


class TaskHandlers:
    """The four task handlers, bound to one injected TaskStore."""

    def __init__(self, store: TaskStore, logger: Optional[TaskLogger] = None):
        self.store = store
        self.logger = logger or TaskLogger()

    def create(self, body: Any) -> HandlerResponse:
        outcome = validate_title(body)
        if not outcome.ok:
            return self._reject("create", outcome.error)

        task = self.store.create(outcome.value)
        self.logger.log_action("create", task.to_dict())
        return HandlerResponse(status=201, body=task.to_dict())

    def list(self) -> HandlerResponse:
        tasks = self.store.list()
        self.logger.log_action("list", {"count": len(tasks)})
        return HandlerResponse(status=200, body=[t.to_dict() for t in tasks])

    def get_by_id(self, raw_id: Any) -> HandlerResponse:
        # An unparseable id is not rejected here; it just never matches.
        task = self.store.find_by_id(parse_task_id(raw_id))
        if task is None:
            return self._reject("get", NotFoundError())

        self.logger.log_action("get", {"id": task.id})
        return HandlerResponse(status=200, body=task.to_dict())

    def mark_done(self, raw_id: Any) -> HandlerResponse:
        outcome = require_task_id(raw_id)
        if not outcome.ok:
            return self._reject("mark_done", outcome.error)

        task = self.store.mark_done(outcome.value)
        if task is None:
            return self._reject("mark_done", NotFoundError())

        self.logger.log_action("mark_done", task.to_dict())
        return HandlerResponse(status=200, body=task.to_dict())

    def _reject(self, action: str, error: TaskboardError) -> HandlerResponse:
        self.logger.log_rejection(action, error.status, error.message)
        return HandlerResponse.from_error(error)
