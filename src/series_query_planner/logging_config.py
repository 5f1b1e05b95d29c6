import logging as root_logging
import sys

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "series_query_planner"


def setup_logging(
    level: str = "INFO",
    pretty: bool = False,
    console: Console | None = None,
    propagate: bool = False,
) -> root_logging.Logger:
    """
    Configures logging for the ``series_query_planner`` namespace.

    Existing handlers on the namespace logger are replaced, so calling this
    more than once never duplicates output.

    Args:
        level: The logging threshold (e.g. "DEBUG", "INFO", "WARNING").
        pretty: If True, log through a Rich handler with colors, timestamps
            and formatted tracebacks. Otherwise use a plain stderr stream.
        console: Optional Rich console for the pretty handler, so log lines
            interleave cleanly with other Rich output. Defaults to a new
            ``Console(stderr=True)``.
        propagate: Whether records also bubble up to the root logger.

    Returns:
        The configured namespace logger.
    """
    logger = root_logging.getLogger(ROOT_LOGGER_NAME)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler: root_logging.Handler
    if pretty:
        handler = RichHandler(
            level=level,
            console=console or Console(stderr=True),
            show_time=True,
            show_path=True,
            markup=True,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(
            root_logging.Formatter(fmt="[dim white]%(name)s[/dim white]: %(message)s", datefmt="[%X]")
        )
        init_message = f"Planner logging initialized at level: [bold]{level}[/bold]"
        extra = {"markup": True}
    else:
        handler = root_logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            root_logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        init_message = f"Planner logging initialized at level: {level}"
        extra = {}

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.debug(init_message, extra=extra)
    return logger


def get_logger(name: str | None = None) -> root_logging.Logger:
    """Return ``name``'s logger, or the package logger when no name is given."""
    if name is not None:
        return root_logging.getLogger(name)
    return root_logging.getLogger(ROOT_LOGGER_NAME)
