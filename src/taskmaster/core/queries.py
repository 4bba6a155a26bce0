"""Read-only task queries and statistics - pure functions, no I/O."""

from collections import Counter
from dataclasses import dataclass
from enum import Enum

from .clock import Clock
from .tasks import Task


class StatusFilter(Enum):
    """Which tasks a status view should include."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass
class TaskStatistics:
    """Aggregate counts over a task list."""

    total: int
    completed: int
    active: int
    completion_rate: float  # percent, 0.0 for an empty list
    priority_distribution: dict[str, int]
    category_distribution: dict[str, int]
    overdue_count: int


def search_tasks(tasks: list[Task], query: str) -> list[Task]:
    """
    Case-insensitive substring search over title and description.

    An empty query matches every task; callers should reject blank queries.
    """
    needle = query.casefold()
    return [
        t
        for t in tasks
        if needle in t.title.casefold() or needle in t.description.casefold()
    ]


def filter_by_status(tasks: list[Task], status: StatusFilter) -> list[Task]:
    if status is StatusFilter.COMPLETED:
        return [t for t in tasks if t.is_completed]
    if status is StatusFilter.ACTIVE:
        return [t for t in tasks if not t.is_completed]
    return list(tasks)


def filter_overdue(tasks: list[Task], clock: Clock) -> list[Task]:
    """Active tasks whose due date is before the clock's today."""
    return [t for t in tasks if not t.is_completed and clock.is_overdue(t.due_date)]


def compute_statistics(tasks: list[Task], clock: Clock) -> TaskStatistics:
    """
    Summarize a task list.

    Distributions keep first-seen order of each priority/category value.
    """
    total = len(tasks)
    completed = sum(1 for t in tasks if t.is_completed)
    completion_rate = 100 * completed / total if total > 0 else 0.0

    return TaskStatistics(
        total=total,
        completed=completed,
        active=total - completed,
        completion_rate=completion_rate,
        priority_distribution=dict(Counter(t.priority for t in tasks)),
        category_distribution=dict(Counter(t.category for t in tasks)),
        overdue_count=len(filter_overdue(tasks, clock)),
    )
