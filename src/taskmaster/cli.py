"""TaskMaster CLI - interactive console task manager."""

import logging

import click

from .adapters.memory_store import InMemoryTaskStore
from .config import load_config
from .core.clock import Clock
from .menu import run_menu, seed_examples

logger = logging.getLogger(__name__)


def _parse_today(ctx, param, value: str | None) -> Clock | None:
    if value is None:
        return None
    try:
        return Clock.from_text(value)
    except ValueError:
        raise click.BadParameter("expected a date in DD.MM.YYYY form")


@click.command()
@click.version_option(package_name="taskmaster")
@click.option("--today", "clock", default=None, callback=_parse_today,
              help="Treat this date (DD.MM.YYYY) as today for the whole session")
@click.option("--no-examples", is_flag=True, help="Start with an empty task list")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(clock: Clock | None, no_examples: bool, debug: bool):
    """TaskMaster - in-memory console task manager."""
    config = load_config()

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else config.log_level,
    )

    store = InMemoryTaskStore(clock or Clock.start())
    logger.debug("Session date: %s", store.clock.format(store.clock.today))

    if config.seed_examples and not no_examples:
        seed_examples(store)

    run_menu(store, config)


if __name__ == "__main__":
    main()
