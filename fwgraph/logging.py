"""Package-wide logging setup for fwgraph.

All module loggers hang off the ``fwgraph`` logger, which owns the only
handler. Library code obtains loggers through `get_logger` and never attaches
handlers of its own.

Level conventions:
    DEBUG: one start and one finish line per engine run (graph size,
        accepted relaxations, elapsed time). Never per triple.
    INFO and above: not emitted by the engine; left to the host application.

The handler level defaults to INFO, so a plain run prints nothing. Use
`log_level` to look at engine runs for the duration of a block.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "fwgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``fwgraph`` logger.

    Repeated calls are no-ops until `reset_logging` is called.

    Args:
        level: Level for the ``fwgraph`` logger.
        format_string: Record format; defaults to `DEFAULT_FORMAT`.
        handler: Handler to install; defaults to a stdout StreamHandler.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # Keep propagation on so pytest's caplog sees our records.
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``fwgraph`` configuration.

    Args:
        name: Logger name, normally ``__name__`` of the caller.

    Returns:
        The logger, with its level left to the parent.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the ``fwgraph`` logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch every fwgraph logger to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return every fwgraph logger to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the installed handler so the next call reconfigures (tests only)."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


@contextmanager
def log_level(level: int) -> Iterator[logging.Logger]:
    """Temporarily set the ``fwgraph`` level, restoring the old one on exit.

    Example:
        with log_level(logging.DEBUG):
            floyd_warshall(graph)  # start/finish lines are emitted
    """
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    saved = root.level
    saved_handlers = [(handler, handler.level) for handler in root.handlers]
    set_global_log_level(level)
    try:
        yield root
    finally:
        root.setLevel(saved)
        for handler, handler_level in saved_handlers:
            handler.setLevel(handler_level)


setup_root_logger()
