"""Task parsing and logging setup."""

from __future__ import annotations

import logging
from typing import Any

from gmpmock.gmp_types import Task

_HANDLER_MARK = "_gmpmock_handler"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class TaskParseError(ValueError):
    """Raised when a JSON value is not a well-formed task."""


def parse_task(task_json: Any) -> Task:
    """Parse a decoded JSON task into the ``Task`` subclass named by its ``type``.

    Tasks of a type that is not known become ``UnknownTask``.
    """
    try:
        return Task.from_dict(task_json)
    except ValueError as exc:
        raise TaskParseError(str(exc)) from exc


def setup_logging() -> None:
    """Send all log records at DEBUG and above to stderr, with the logger name.

    Raises ``RuntimeError`` if logging was already set up this way.
    """
    root = logging.getLogger()
    if any(getattr(handler, _HANDLER_MARK, False) for handler in root.handlers):
        raise RuntimeError("Failed to set global logging handler")
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    setattr(handler, _HANDLER_MARK, True)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)