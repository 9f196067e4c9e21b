"""
Validation — Tagged Outcomes for Request Input
===============================================
Every input check returns an Outcome instead of probing types inline
inside a handler. An Outcome is either a success carrying a value or a
failure carrying a TaskboardError subclass.

Errors:
    ValidationError  — missing/wrong-typed title, unparseable id  → 400
    NotFoundError    — no record for the given id                 → 404
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")

TITLE_ERROR = "Title is required and must be a string"
ID_FORMAT_ERROR = "Invalid ID format"
NOT_FOUND_ERROR = "Task not found"

# Leading whitespace, optional sign, then the longest run of ASCII digits.
# Anything after the digits is ignored ("12abc" -> 12).
_INT_PREFIX = re.compile(r"\s*([+-]?)([0-9]+)")

# Longer digit runs are parsed as UNMATCHED_ID, which no task can ever have.
MAX_ID_DIGITS = 20
UNMATCHED_ID = 10 ** MAX_ID_DIGITS


# ─────────────────────────────────────────────────────────────
#  Errors
# ─────────────────────────────────────────────────────────────

class TaskboardError(Exception):
    """Base error with an HTTP status and a client-facing message."""

    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationError(TaskboardError):
    status = 400


class NotFoundError(TaskboardError):
    status = 404

    def __init__(self, message: str = NOT_FOUND_ERROR):
        super().__init__(message)


# ─────────────────────────────────────────────────────────────
#  Outcome
# ─────────────────────────────────────────────────────────────

@dataclass
class Outcome(Generic[T]):
    """Result of a validation step: exactly one of value / error is set."""

    value: Optional[T] = None
    error: Optional[TaskboardError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: TaskboardError) -> Outcome[T]:
        return cls(error=error)


# ─────────────────────────────────────────────────────────────
#  Checks
# ─────────────────────────────────────────────────────────────

def validate_title(body: Any) -> Outcome[str]:
    """Check that the body is a mapping whose `title` is a string.

    Only presence and type are checked; an empty string passes.
    """
    if not isinstance(body, dict):
        return Outcome.failure(ValidationError(TITLE_ERROR))
    title = body.get("title")
    if not isinstance(title, str):
        return Outcome.failure(ValidationError(TITLE_ERROR))
    return Outcome.success(title)


def parse_task_id(raw: Any) -> Optional[int]:
    """Parse a base-10 id from a path segment, or None if there are no digits."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if not isinstance(raw, str):
        return None
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_ID_DIGITS:
        return -UNMATCHED_ID if sign == "-" else UNMATCHED_ID
    return int(sign + digits)


def require_task_id(raw: Any) -> Outcome[int]:
    """Like parse_task_id, but an unparseable id is a ValidationError."""
    task_id = parse_task_id(raw)
    if task_id is None:
        return Outcome.failure(ValidationError(ID_FORMAT_ERROR))
    return Outcome.success(task_id)
