"""
Task Store — In-Memory Registry of Tasks
=========================================
Pure data layer. Owns the task sequence and the id counter, and is the
only component allowed to mutate task state.

Components:
    Task       — A unit of tracked work (id, title, completed)
    TaskStore  — Ordered registry with monotonically increasing ids

The store is an explicit instance injected into the handlers, so every
test (or every app) gets its own registry. Call reset() to tear it down.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


# ─────────────────────────────────────────────────────────────
#  Task
# ─────────────────────────────────────────────────────────────

@dataclass
class Task:
    """A single tracked task.

    `completed` only ever moves False → True, through TaskStore.mark_done().
    """

    id: int
    title: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape {id, title, completed}."""
        return {"id": self.id, "title": self.title, "completed": self.completed}


# ─────────────────────────────────────────────────────────────
#  Task Store
# ─────────────────────────────────────────────────────────────

class TaskStore:
    """Insertion-ordered task registry.

    Ids start at 1 and are never reused (there is no delete).
    """

    def __init__(self):
        self._tasks: list[Task] = []
        self._next_id = 1

    def create(self, title: str) -> Task:
        """Origin — append a new open task. The title is pre-validated."""
        task = Task(id=self._next_id, title=title, completed=False)
        self._tasks.append(task)
        self._next_id += 1
        return task

    def list(self) -> list[Task]:
        """All tasks in insertion order (a copy of the sequence)."""
        return list(self._tasks)

    def find_by_id(self, task_id: Optional[int]) -> Optional[Task]:
        """Linear scan on id equality. Returns None when absent."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def mark_done(self, task_id: Optional[int]) -> Optional[Task]:
        """Fold — set completed in place. Already-done tasks stay done."""
        task = self.find_by_id(task_id)
        if task is None:
            return None
        task.completed = True
        return task

    def reset(self) -> None:
        """Drop every task and rewind the counter to 1."""
        self._tasks.clear()
        self._next_id = 1

    @property
    def count(self) -> int:
        return len(self._tasks)

    @property
    def next_id(self) -> int:
        """The id the next create() will assign."""
        return self._next_id
