from __future__ import annotations

"""Logging helpers that standardize codecollector logger names and configuration.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration of the base 'codecollector' logger.
    - get_logger: Namespaced logger factory ('codecollector.*').
    - trace_io utilities gated by CODECOLLECT_TRACE_IO.

The level can be overridden with CODECOLLECT_LOG_LEVEL (name or number).
"""

import logging
import os
from typing import Mapping, Optional, TextIO

from codecollector.constants import ENV_LOG_LEVEL, ENV_TRACE_IO

BASE_LOGGER_NAME = 'codecollector'


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'codecollector.io.walker').
        - msg: Formatted message string.
        - version: codecollector.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        # Lazy import, the package __init__ imports this module.
        from codecollector import __version__
        return str(__version__)

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        payload = {
            'ts': ts_str,
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }

        ctx = getattr(record, 'context', None)
        if isinstance(ctx, dict) and ctx:
            payload['ctx'] = ctx

        return json.dumps(payload, ensure_ascii=False)


def resolve_level(default: int = logging.INFO, *, environ: Optional[Mapping[str, str]] = None) -> int:
    """Return the level named by CODECOLLECT_LOG_LEVEL, or *default*."""
    env = os.environ if environ is None else environ
    raw = (env.get(ENV_LOG_LEVEL) or '').strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'codecollector' logger once and return it.

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)

    return base


def reset_base_logger() -> None:
    """Drop handlers installed by `setup_base_logger` so it can be configured again."""
    base = logging.getLogger(BASE_LOGGER_NAME)
    for handler in list(base.handlers):
        base.removeHandler(handler)
    base.propagate = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'codecollector'."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{BASE_LOGGER_NAME}.{name}')


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv(ENV_TRACE_IO) == '1'


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled.

    Args:
        logger: Target logger.
        message: Human-readable description.
        **ctx: Optional structured context appended in debug format.
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx, extra={'context': ctx})
    else:
        logger.debug('%s', message)
