"""Interactive console menu - the presentation layer over the task store."""

import logging

import click

from .adapters.memory_store import InMemoryTaskStore
from .config import Config
from .core.display import format_statistics, format_task, format_task_list
from .core.queries import (
    StatusFilter,
    compute_statistics,
    filter_by_status,
    filter_overdue,
    search_tasks,
)
from .core.validation import DEFAULT_CATEGORIES, PRIORITIES, is_valid_date, is_valid_title
from .ports.task_repo import UpdateResult

logger = logging.getLogger(__name__)

OTHER_CATEGORY = "Other..."

MAIN_MENU = """
TASK MASTER - Task Management
=============================
1. View tasks
2. Add task
3. Edit task
4. Mark task completed
5. Delete task
6. Search tasks
7. Statistics
8. Exit
"""

VIEW_MENU = """
View:
1. All tasks
2. Active only
3. Completed only
4. Overdue"""

EXAMPLE_TASKS = [
    ("Learn Python", "Get comfortable with dataclasses and generators", "High", "11.10.2025", "Study"),
    ("Buy groceries", "Milk, bread, fruit", "Medium", "12.10.2025", "Personal"),
]


def seed_examples(store: InMemoryTaskStore) -> None:
    """Add the example tasks shown on a fresh start."""
    for title, description, priority, due_date, category in EXAMPLE_TASKS:
        store.create(title, description, priority, due_date, category)


# ============== Prompt helpers ==============


def _read_line(prompt: str) -> str:
    return click.prompt(prompt, default="", show_default=False).strip()


def _read_id(prompt: str = "Task ID") -> int | None:
    raw = _read_line(prompt)
    # str.isdigit alone also accepts "²" and "①", which int() rejects
    if not (raw.isascii() and raw.isdigit()):
        click.echo("Invalid ID.")
        return None
    return int(raw)


def _read_required(prompt: str, default: str | None = None) -> str:
    while True:
        value = click.prompt(prompt, default=default).strip()
        if is_valid_title(value):
            return value
        click.echo("Error: this field cannot be empty.")


def _read_date(prompt: str, default: str | None = None) -> str:
    while True:
        value = click.prompt(prompt, default=default).strip()
        if is_valid_date(value):
            return value
        click.echo("Invalid date format. Use DD.MM.YYYY.")


def _select(options: list[str], prompt: str, current: str | None = None) -> str:
    """Numbered choice from a fixed list; re-prompts until in range."""
    click.echo(prompt)
    for index, option in enumerate(options, start=1):
        click.echo(f"{index}. {option}")
    default = options.index(current) + 1 if current in options else None
    choice = click.prompt(
        f"Choose an option (1-{len(options)})",
        type=click.IntRange(1, len(options)),
        default=default,
    )
    return options[choice - 1]


def _select_category(current: str | None = None) -> str:
    options = [*DEFAULT_CATEGORIES, OTHER_CATEGORY]
    preset = current if current in DEFAULT_CATEGORIES else (OTHER_CATEGORY if current else None)
    selected = _select(options, "Category:", current=preset)
    if selected != OTHER_CATEGORY:
        return selected
    custom_default = current if current and current not in DEFAULT_CATEGORIES else None
    return _read_required("Category name", default=custom_default)


# ============== Menu actions ==============


def view_tasks(store: InMemoryTaskStore) -> None:
    click.echo(VIEW_MENU)
    choice = _read_line("Choose a view")
    tasks = store.all()
    match choice:
        case "1":
            shown = filter_by_status(tasks, StatusFilter.ALL)
        case "2":
            shown = filter_by_status(tasks, StatusFilter.ACTIVE)
        case "3":
            shown = filter_by_status(tasks, StatusFilter.COMPLETED)
        case "4":
            shown = filter_overdue(tasks, store.clock)
        case _:
            click.echo("Invalid choice.")
            return
    click.echo(format_task_list(shown, store.clock))


def add_task(store: InMemoryTaskStore) -> None:
    click.echo("\nNew task")
    title = _read_required("Title")
    description = _read_line("Description")
    priority = _select(list(PRIORITIES), "Priority:")
    due_date = _read_date("Due date (DD.MM.YYYY)")
    category = _select_category()

    task = store.create(title, description, priority, due_date, category)
    if task is None:
        click.echo("Could not create the task.")
        return
    click.echo("\nTask created!")
    click.echo(format_task(task, store.clock))


def edit_task(store: InMemoryTaskStore) -> None:
    click.echo("\nEdit task")
    task_id = _read_id()
    if task_id is None:
        return
    task = store.find_by_id(task_id)
    if task is None:
        click.echo("Task not found.")
        return
    if task.is_completed:
        click.echo("Completed tasks cannot be edited.")
        return

    click.echo("Current values:")
    click.echo(format_task(task, store.clock))
    click.echo("\nEnter new values (press Enter to keep the current one):")

    title = _read_required("Title", default=task.title)
    description = click.prompt(
        "Description", default=task.description, show_default=task.has_description
    ).strip()
    priority = _select(list(PRIORITIES), "Priority:", current=task.priority)
    due_date = _read_date("Due date (DD.MM.YYYY)", default=task.due_date)
    category = _select_category(current=task.category)

    result = store.update(task, title, description, priority, due_date, category)
    match result:
        case UpdateResult.UPDATED:
            click.echo("Task updated!")
        case UpdateResult.COMPLETED:
            click.echo("Completed tasks cannot be edited.")
        case UpdateResult.INVALID:
            click.echo("Update failed: invalid values.")


def complete_task(store: InMemoryTaskStore) -> None:
    click.echo("\nMark task completed")
    task_id = _read_id()
    if task_id is None:
        return
    if store.mark_completed(task_id):
        click.echo("Task marked as completed!")
    else:
        click.echo("Task not found.")


def delete_task(store: InMemoryTaskStore, confirm: bool = True) -> None:
    click.echo("\nDelete task")
    task_id = _read_id()
    if task_id is None:
        return
    task = store.find_by_id(task_id)
    if task is None:
        click.echo("Task not found.")
        return

    click.echo(format_task(task, store.clock))
    if confirm and not click.confirm("Delete this task?", default=False):
        click.echo("Deletion cancelled.")
        return

    if store.delete(task_id):
        click.echo("Task deleted!")
    else:
        click.echo("Task not found.")


def search(store: InMemoryTaskStore) -> None:
    click.echo("\nSearch tasks")
    query = _read_line("Search query")
    if not query:
        click.echo("Search query cannot be empty.")
        return

    results = search_tasks(store.all(), query)
    if results:
        click.echo(f"Found {len(results)} task(s):")
    click.echo(format_task_list(results, store.clock))


def show_statistics(store: InMemoryTaskStore) -> None:
    click.echo(format_statistics(compute_statistics(store.all(), store.clock)))


# ============== Main loop ==============


def run_menu(store: InMemoryTaskStore, config: Config) -> None:
    """Read-evaluate loop; returns on Exit, end of input or Ctrl+C."""
    actions = {
        "1": view_tasks,
        "2": add_task,
        "3": edit_task,
        "4": complete_task,
        "5": lambda s: delete_task(s, confirm=config.confirm_delete),
        "6": search,
        "7": show_statistics,
    }

    click.echo("Welcome to TaskMaster!")
    try:
        while True:
            click.echo(MAIN_MENU)
            choice = _read_line("Choose an action")
            if choice == "8":
                click.echo("Goodbye!")
                return

            action = actions.get(choice)
            if action is None:
                click.echo("Invalid choice.")
            else:
                logger.debug("Menu action %s", choice)
                action(store)

            if config.pause_after_action:
                click.pause("\nPress any key to continue...")
    except click.Abort:
        click.echo("\nGoodbye!")
