"""Package-wide loggers that stay quiet until an application opts in.

Modules obtain their logger with ``get_logger(__name__)``; nothing is printed
unless :func:`configure_logging` is called, typically with ``logging.DEBUG``
to trace which neighbors each query selected.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

ROOT_LOGGER_NAME = "pointinterp"
_NULL_HANDLER = logging.NullHandler()


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return the named logger with a shared ``NullHandler`` attached once.

    Args:
        name: Dotted logger name, normally a module's ``__name__``.

    Returns:
        The :class:`logging.Logger` for ``name``.
    """

    logger = logging.getLogger(name)
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(_NULL_HANDLER)
    return logger


def configure_logging(
    level: int = logging.INFO,
    *,
    handlers: Optional[Iterable[logging.Handler]] = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Route pointinterp log records to real handlers.

    Args:
        level: Threshold for the ``pointinterp`` logger and its children.
        handlers: Where records go. Defaults to a single stderr
            ``StreamHandler``.
        format_string: ``logging.Formatter`` pattern installed on every
            handler passed in or created here.

    Returns:
        The ``pointinterp`` logger after configuration.
    """

    logger = get_logger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if handlers is None:
        handlers = [logging.StreamHandler()]
    for handler in handlers:
        if format_string:
            handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
