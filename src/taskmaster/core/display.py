"""Pure text formatting for tasks and statistics - no I/O."""

from .clock import Clock
from .queries import TaskStatistics
from .tasks import Task

SEPARATOR = "-" * 50


def format_task(task: Task, clock: Clock) -> str:
    """
    Format a single task as a multi-line block.

    Active tasks past their due date get an [OVERDUE] marker.
    """
    status = "[COMPLETED]" if task.is_completed else "[ACTIVE]"
    overdue = " [OVERDUE]" if not task.is_completed and clock.is_overdue(task.due_date) else ""
    description = task.description if task.has_description else "No description"

    return "\n".join(
        [
            f"ID: {task.id} {status}{overdue}",
            f"Title: {task.title}",
            f"Description: {description}",
            f"Category: {task.category} | Due: {task.due_date} | Priority: {task.priority}",
            f"Created: {clock.format(task.created_at)}",
            SEPARATOR,
        ]
    )


def format_task_list(tasks: list[Task], clock: Clock) -> str:
    if not tasks:
        return "No tasks found."
    return "\n".join(format_task(t, clock) for t in tasks)


def format_statistics(stats: TaskStatistics) -> str:
    """Format statistics as a plain-text report."""
    lines = [
        "STATISTICS",
        "==========",
        f"Total tasks: {stats.total}",
        f"Completed: {stats.completed}",
        f"Active: {stats.active}",
        f"Completion rate: {stats.completion_rate:.1f}%",
        f"Overdue: {stats.overdue_count}",
        "",
        "By priority:",
    ]
    lines.extend(f"   {priority}: {count}" for priority, count in stats.priority_distribution.items())
    lines.append("")
    lines.append("By category:")
    lines.extend(f"   {category}: {count}" for category, count in stats.category_distribution.items())
    return "\n".join(lines)
