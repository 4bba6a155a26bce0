"""Ports - interfaces/protocols for external dependencies."""

from .task_repo import TaskRepository, UpdateResult

__all__ = [
    "TaskRepository",
    "UpdateResult",
]
