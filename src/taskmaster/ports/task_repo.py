"""Task repository interface."""

from enum import Enum
from typing import Protocol

from taskmaster.core.tasks import Task


class UpdateResult(Enum):
    """Outcome of an edit. Only UPDATED is truthy."""

    UPDATED = "updated"
    INVALID = "invalid"
    COMPLETED = "completed"

    def __bool__(self) -> bool:
        return self is UpdateResult.UPDATED


class TaskRepository(Protocol):
    """Interface for creating, looking up and mutating tasks."""

    def create(
        self,
        title: str,
        description: str,
        priority: str,
        due_date: str,
        category: str,
    ) -> Task | None:
        """Create and store a task. Returns None if any field is invalid."""
        ...

    def find_by_id(self, task_id: int) -> Task | None:
        """Look up a task. Returns None if not found."""
        ...

    def update(
        self,
        task: Task,
        title: str,
        description: str,
        priority: str,
        due_date: str,
        category: str,
    ) -> UpdateResult:
        """Replace all editable fields at once, or none of them."""
        ...

    def delete(self, task_id: int) -> bool:
        """Remove a task permanently. Returns False if not found."""
        ...

    def mark_completed(self, task_id: int) -> bool:
        """Mark a task completed. Returns False if not found."""
        ...

    def all(self) -> list[Task]:
        """All tasks in creation order."""
        ...
