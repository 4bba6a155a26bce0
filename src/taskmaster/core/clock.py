"""Date policy - the process-wide "today" and overdue checks."""

from dataclasses import dataclass
from datetime import date

from .validation import DATE_FORMAT, parse_date


@dataclass(frozen=True)
class Clock:
    """
    A frozen calendar date used for a whole session.

    Capturing "today" once keeps overdue markers and created_at stamps
    stable for the lifetime of the process.
    """

    today: date

    @classmethod
    def start(cls) -> "Clock":
        return cls(today=date.today())

    @classmethod
    def from_text(cls, text: str) -> "Clock":
        """Build a clock from a DD.MM.YYYY string. Raises ValueError if invalid."""
        parsed = parse_date(text)
        if parsed is None:
            raise ValueError(f"Invalid date: {text!r} (expected DD.MM.YYYY)")
        return cls(today=parsed)

    def is_overdue(self, due_date: str) -> bool:
        """Due strictly before today. Unparseable dates are never overdue."""
        due = parse_date(due_date)
        if due is None:
            return False
        return due < self.today

    @staticmethod
    def format(value: date) -> str:
        return value.strftime(DATE_FORMAT)
