from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, TextIO

from codecollector.constants import ENV_JSON_LOGS
from codecollector.logging.helpers import get_logger, resolve_level, setup_base_logger


class DefaultLoggerFactory:
    """Hands out 'codecollector.*' loggers, configuring the base logger on first use.

    `from_env` reads CODECOLLECT_JSON_LOGS and CODECOLLECT_LOG_LEVEL; the
    explicit constructor is used by tests and embedding code.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self.json_logs = bool(json_logs)
        self.level = int(level)
        self._stream = stream
        self._configured = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, *, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        env = os.environ if environ is None else environ
        return cls(
            json_logs=env.get(ENV_JSON_LOGS) == '1',
            level=resolve_level(logging.INFO, environ=env),
            stream=stream,
        )

    @property
    def mode(self) -> tuple:
        return (self.json_logs, self.level)

    def get_logger(self, name: str) -> logging.Logger:
        if not self._configured:
            setup_base_logger(json_logs=self.json_logs, level=self.level, stream=self._stream)
            self._configured = True
        return get_logger(name)
