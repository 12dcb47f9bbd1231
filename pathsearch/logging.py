"""Logging for pathsearch engines.

All engine loggers live below the ``pathsearch`` package logger. Importing the
package only attaches a ``NullHandler``, so run summaries stay silent unless
the application configures logging itself or calls `enable_debug_logging()`.

Example:
    from pathsearch import bfs
    from pathsearch.logging import enable_debug_logging

    enable_debug_logging()
    bfs.run(0, lambda n: (n + 1,) if n < 10 else ())
    # ... - pathsearch.algorithms.common - DEBUG - bfs exhausted: 11 expansions, 11 nodes discovered
"""

import logging
from typing import Optional

PACKAGE_LOGGER_NAME = "pathsearch"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())

# Handler installed by enable_debug_logging(), if any
_debug_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a pathsearch module.

    Args:
        name: Module name, normally ``__name__``. It must lie in the
            ``pathsearch`` namespace so records reach the package logger.

    Raises:
        ValueError: If `name` is outside the ``pathsearch`` namespace.
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        raise ValueError(f"Logger '{name}' is not in the '{PACKAGE_LOGGER_NAME}' namespace")
    return logging.getLogger(name)


def enable_debug_logging(
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """Send engine run summaries and progress lines to a handler.

    Calling it again replaces the previously installed handler.

    Args:
        handler: Destination (default: StreamHandler on stderr).
        format_string: Record format (default: `DEFAULT_FORMAT`).

    Returns:
        The installed handler.
    """
    global _debug_handler

    disable_debug_logging()
    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    _package_logger.addHandler(handler)
    _package_logger.setLevel(logging.DEBUG)
    _debug_handler = handler
    return handler


def disable_debug_logging() -> None:
    """Remove the handler installed by `enable_debug_logging()`.

    The package logger level is reset, so the application's logging
    configuration applies again.
    """
    global _debug_handler

    if _debug_handler is not None:
        _package_logger.removeHandler(_debug_handler)
        _debug_handler = None
    _package_logger.setLevel(logging.NOTSET)
