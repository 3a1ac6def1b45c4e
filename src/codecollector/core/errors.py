from __future__ import annotations

"""Error taxonomy for codecollector.

Every error maps to exit status 1 in `codecollector.cli.main`.
"""

from pathlib import Path
from typing import Optional


class CollectorError(Exception):
    """Base class for all collector failures."""


class UsageError(CollectorError):
    """Malformed command line, or help requested."""

    def __init__(self, message: str = '', *, help_requested: bool = False) -> None:
        super().__init__(message)
        self.help_requested = help_requested


class NoMatchError(CollectorError):
    """The walk completed without a single matching file."""

    def __init__(self, extension: str) -> None:
        super().__init__(f'No .{extension} files found')
        self.extension = extension


class CollectorIOError(CollectorError):
    """A source file could not be read, or the output could not be written."""

    def __init__(self, message: str, *, path: Optional[Path] = None, cause: Optional[OSError] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    @classmethod
    def reading(cls, path: Path, exc: OSError) -> 'CollectorIOError':
        return cls(f'could not read {path}: {exc.strerror or exc}', path=path, cause=exc)

    @classmethod
    def writing(cls, path: Path, exc: OSError) -> 'CollectorIOError':
        return cls(f'could not write {path}: {exc.strerror or exc}', path=path, cause=exc)
