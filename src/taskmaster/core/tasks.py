"""Pure task domain model - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date


@dataclass
class Task:
    """A single in-memory task."""

    id: int
    title: str
    description: str
    priority: str
    due_date: str  # DD.MM.YYYY, as entered
    category: str
    created_at: date
    is_completed: bool = False

    @property
    def has_description(self) -> bool:
        return bool(self.description.strip())
