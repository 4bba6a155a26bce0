"""Field validation - pure predicates, no I/O dependencies."""

from datetime import date, datetime

PRIORITIES = ("Low", "Medium", "High", "Urgent")
DEFAULT_CATEGORIES = ("Work", "Personal", "Study", "Health", "Finance")

# day.month.year, e.g. 11.10.2025
DATE_FORMAT = "%d.%m.%Y"


def parse_date(text: str) -> date | None:
    """
    Parse a DD.MM.YYYY date.

    Returns None for anything that is not a real calendar date in that form.
    """
    if not isinstance(text, str):
        return None
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def is_valid_title(text: str) -> bool:
    return isinstance(text, str) and bool(text.strip())


def is_valid_priority(value: str) -> bool:
    return value in PRIORITIES


def is_valid_category(value: str) -> bool:
    """Default categories or any non-blank custom one."""
    if not isinstance(value, str):
        return False
    return value in DEFAULT_CATEGORIES or bool(value.strip())


def is_valid_date(text: str) -> bool:
    return parse_date(text) is not None
