from __future__ import annotations

"""Byte-transparent source reader.

Files are read in binary mode so that any encoding is copied unchanged.
Lines are split on b'\\n' only and keep their terminator; a missing final
newline stays missing.
"""

import logging
from pathlib import Path
from typing import List, Optional

from codecollector.core.errors import CollectorIOError
from codecollector.logging.helpers import get_logger, trace_io


class SourceReader:
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.readers')

    def read_lines(self, path: Path) -> List[bytes]:
        """Return the lines of *path*; any OSError aborts the run."""
        try:
            with open(path, 'rb') as fh:
                lines = fh.readlines()
        except OSError as exc:
            raise CollectorIOError.reading(path, exc) from exc
        trace_io(self._log, 'read', path=str(path), lines=len(lines))
        return lines
