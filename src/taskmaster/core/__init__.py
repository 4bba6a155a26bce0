"""Functional core - pure business logic with no I/O."""

from .tasks import Task
from .clock import Clock
from .validation import (
    DEFAULT_CATEGORIES,
    PRIORITIES,
    is_valid_category,
    is_valid_date,
    is_valid_priority,
    is_valid_title,
    parse_date,
)
from .queries import (
    StatusFilter,
    TaskStatistics,
    compute_statistics,
    filter_by_status,
    filter_overdue,
    search_tasks,
)
from .display import format_statistics, format_task, format_task_list

__all__ = [
    # Tasks
    "Task",
    # Clock
    "Clock",
    # Validation
    "PRIORITIES",
    "DEFAULT_CATEGORIES",
    "parse_date",
    "is_valid_title",
    "is_valid_priority",
    "is_valid_category",
    "is_valid_date",
    # Queries
    "StatusFilter",
    "TaskStatistics",
    "search_tasks",
    "filter_by_status",
    "filter_overdue",
    "compute_statistics",
    # Display
    "format_task",
    "format_task_list",
    "format_statistics",
]
