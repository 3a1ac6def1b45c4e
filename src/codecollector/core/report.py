from __future__ import annotations

"""Runtime report of a collection run.

Only numbers that are cheap to obtain while streaming are recorded:
file count, bytes read from sources, bytes written to the staging file
and the time spent in each stage.
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


@dataclass
class CollectionReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    extension: str = ''
    output: Optional[Path] = None

    files: List[Path] = field(default_factory=list)
    bytes_read: int = 0
    bytes_written: int = 0

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {'walk': 0.0, 'commit': 0.0}
    )

    @property
    def files_total(self) -> int:
        return len(self.files)

    def add_file(self, path: Path, *, read: int) -> None:
        self.files.append(path)
        self.bytes_read += read

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def summary(self) -> str:
        dur = f'{self.duration_s:.3f}s' if self.duration_s is not None else 'n/a'
        return (f'{self.files_total} .{self.extension} file(s), '
                f'{self.bytes_read} bytes read, {self.bytes_written} bytes written in {dur}')

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                'started_at': self.started_at,
                'finished_at': self.finished_at,
                'duration_s': self.duration_s,
                'extension': self.extension,
                'output': str(self.output) if self.output is not None else None,
                'files_total': self.files_total,
                'files': [str(p) for p in self.files],
                'bytes_read': self.bytes_read,
                'bytes_written': self.bytes_written,
                'time_by_stage': self.time_by_stage,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: CollectionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
