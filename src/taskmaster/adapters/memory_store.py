"""In-memory task store adapter."""

import logging

from taskmaster.core.clock import Clock
from taskmaster.core.tasks import Task
from taskmaster.core.validation import (
    is_valid_category,
    is_valid_date,
    is_valid_priority,
    is_valid_title,
)
from taskmaster.ports.task_repo import UpdateResult

logger = logging.getLogger(__name__)


def _fields_valid(title: str, priority: str, due_date: str, category: str) -> bool:
    return (
        is_valid_title(title)
        and is_valid_priority(priority)
        and is_valid_category(category)
        and is_valid_date(due_date)
    )


class InMemoryTaskStore:
    """
    Ordered, in-memory task collection.

    Implements TaskRepository protocol. Ids start at 1 and are never reused,
    even after deletion. Nothing survives the process.
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or Clock.start()
        self._tasks: list[Task] = []
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._tasks)

    def all(self) -> list[Task]:
        """All tasks in creation order."""
        return list(self._tasks)

    def create(
        self,
        title: str,
        description: str,
        priority: str,
        due_date: str,
        category: str,
    ) -> Task | None:
        """Create and store a task. Returns None if any field is invalid."""
        if not _fields_valid(title, priority, due_date, category):
            logger.warning(
                "Rejected new task: title=%r priority=%r due_date=%r category=%r",
                title, priority, due_date, category,
            )
            return None

        task = Task(
            id=self._next_id,
            title=title.strip(),
            description=description.strip(),
            priority=priority,
            due_date=due_date.strip(),
            category=category.strip(),
            created_at=self.clock.today,
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.info("Created task %d: %s", task.id, task.title)
        return task

    def find_by_id(self, task_id: int) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def update(
        self,
        task: Task,
        title: str,
        description: str,
        priority: str,
        due_date: str,
        category: str,
    ) -> UpdateResult:
        """
        Replace all editable fields at once, or none of them.

        Completed tasks are read-only and come back as UpdateResult.COMPLETED.
        """
        if task.is_completed:
            logger.warning("Refused to edit completed task %d", task.id)
            return UpdateResult.COMPLETED
        if not _fields_valid(title, priority, due_date, category):
            logger.warning("Rejected edit of task %d: invalid field value", task.id)
            return UpdateResult.INVALID

        task.title = title.strip()
        task.description = description.strip()
        task.priority = priority
        task.due_date = due_date.strip()
        task.category = category.strip()
        logger.info("Updated task %d", task.id)
        return UpdateResult.UPDATED

    def delete(self, task_id: int) -> bool:
        task = self.find_by_id(task_id)
        if task is None:
            logger.debug("Delete: task %d not found", task_id)
            return False
        self._tasks.remove(task)
        logger.info("Deleted task %d", task_id)
        return True

    def mark_completed(self, task_id: int) -> bool:
        """Idempotent; completing a completed task still returns True."""
        task = self.find_by_id(task_id)
        if task is None:
            logger.debug("Complete: task %d not found", task_id)
            return False
        task.is_completed = True
        logger.info("Completed task %d", task_id)
        return True
