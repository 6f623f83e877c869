from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler
from typing import Any
from loguru import logger

from syncgroup.environment import LoggingSettings


# Singleton Console instance, bound to stderr so it never mixes with command output
def get_console() -> Console:
    if not hasattr(get_console, "_console"):
        get_console._console = Console(stderr=True)
    return get_console._console


def print_table(headers: list[str], rows: list[list[Any]], title: str | None = None):
    """Print a formatted table using Rich library.

    Args:
        headers (list[str]): Column headers for the table.
        rows (list[list[Any]]): Data rows to display in the table.
        title (str | None, optional): Title of the table. Defaults to None.
    """
    console = get_console()
    table = Table(title=title)
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*[str(cell) for cell in row])
    console.print(table)


def configure_logging(settings: LoggingSettings | None = None, verbose: bool = False) -> str:
    """Route loguru output through a RichHandler on the shared console.

    Environment variables (read through ``LoggingSettings``):
        SYNCGROUP_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        SYNCGROUP_DEBUG: Also log to a file (true, 1, yes)
        SYNCGROUP_LOG_FILE: Log file path (default: syncgroup.log)

    Args:
        settings: Logging settings, loaded from the environment when omitted
        verbose: Force DEBUG regardless of the configured level

    Returns:
        str: The level that was applied
    """
    settings = settings or LoggingSettings.from_env()
    level = "DEBUG" if verbose else settings.log_level

    logger.remove()
    handler = RichHandler(console=get_console(), rich_tracebacks=True, show_path=False)
    logger.add(handler, level=level, format="{message}")

    if settings.debug:
        try:
            logger.add(
                settings.log_file,
                level=level,
                format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
            )
        except OSError as error:
            logger.error(f"Failed to set up file logging: {error}")

    return level
