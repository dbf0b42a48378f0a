"""Logging setup for the ``fars`` package: JSON or plain-text records."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, TextIO

_PACKAGE_LOGGER = "fars"
_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else arrived via ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render one log record per line as a JSON object.

    Every line carries ``ts`` (UTC, ISO 8601), ``level``, ``logger`` and
    ``msg``, then the run context given at construction (for the CLI, the
    subcommand name), then any ``extra=`` fields of the call such as
    ``year``, ``file`` or ``state``.  WARNING and above also name the
    source location as ``where`` so a skipped year can be traced to the
    loader that dropped it.

    Args:
        context: Fields added to every record, e.g. ``{"command": "map"}``.
            Per-call ``extra=`` fields win on a key clash.
    """

    def __init__(self, context: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__()
        self.context: Dict[str, Any] = dict(context or {})

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": created.isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(self.context)
        payload.update(
            (key, value) for key, value in vars(record).items()
            if key not in _RECORD_ATTRS
        )

        if record.levelno >= logging.WARNING:
            payload["where"] = f"{record.module}:{record.lineno}"
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
    context: Optional[Mapping[str, Any]] = None,
) -> logging.Logger:
    """Attach a single stream handler to the ``fars`` package logger.

    Calling it again replaces the previous handler, so the CLI can be
    invoked repeatedly in one process (tests) without duplicate output.

    Args:
        level: Logging level for the package logger.
        json_format: Use ``JsonFormatter`` instead of plain text.
        stream: Target stream; defaults to ``sys.stderr``.
        context: Run context added to every JSON record.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter(context))
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
