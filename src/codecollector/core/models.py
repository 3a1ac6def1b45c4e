from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from codecollector.constants import DEFAULT_EXTENSION, DEFAULT_OUTPUT


def resolve_output_path(output: str | Path, cwd: Path | None = None) -> Path:
    """Anchor a relative *output* at *cwd* (default: process working directory).

    Absolute paths are returned as given; no further normalization happens.
    """
    path = Path(output)
    if path.is_absolute():
        return path
    base = Path(cwd) if cwd is not None else Path(os.getcwd())
    return base / path


@dataclass(frozen=True)
class CollectorConfig:
    """Immutable run configuration, built once from the command line."""
    extension: str = DEFAULT_EXTENSION
    output: Path = Path(DEFAULT_OUTPUT)
    remove_empty_lines: bool = False
    root: Path = field(default_factory=lambda: Path(os.getcwd()))

    @property
    def pattern(self) -> str:
        """Glob matched against each file name."""
        return f'*.{self.extension}'

    def resolved(self, cwd: Path | None = None) -> 'CollectorConfig':
        """Return a copy whose output path is absolute."""
        out = resolve_output_path(self.output, cwd)
        if out == self.output:
            return self
        return CollectorConfig(
            extension=self.extension,
            output=out,
            remove_empty_lines=self.remove_empty_lines,
            root=self.root,
        )
