from __future__ import annotations

"""Staging file that is atomically moved over the final output.

The staging file lives in the destination directory so that the final
`os.replace` never crosses a filesystem boundary. Unless `commit()` has
succeeded, leaving the context removes the staging file, whatever the
exception (including KeyboardInterrupt).
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import BinaryIO, Optional

from codecollector.core.errors import CollectorIOError
from codecollector.logging.helpers import get_logger, trace_io

# Mode of a freshly created output before the umask is applied.
CREATE_MODE = 0o666


class StagingFile:
    def __init__(self, target: Path, *, logger: Optional[logging.Logger] = None) -> None:
        self._target = Path(target)
        self._log = logger or get_logger('io.staging')
        self._fh: Optional[BinaryIO] = None
        self._path: Optional[Path] = None
        self._committed = False
        self.bytes_written = 0

    @property
    def path(self) -> Path:
        if self._path is None:
            raise RuntimeError('staging file is not open')
        return self._path

    def __enter__(self) -> 'StagingFile':
        try:
            tf = tempfile.NamedTemporaryFile(
                mode='wb',
                delete=False,
                dir=self._target.parent,
                prefix=f'.{self._target.name}.',
                suffix='.tmp',
            )
        except OSError as exc:
            raise CollectorIOError.writing(self._target, exc) from exc
        self._fh = tf
        self._path = Path(tf.name)
        trace_io(self._log, 'staging opened', path=str(self._path))
        return self

    def __exit__(self, exc_type, exc, tb):
        if not self._committed:
            self.discard()
        return False

    def write(self, data: bytes) -> int:
        if self._fh is None:
            raise RuntimeError('staging file is not open')
        try:
            self._fh.write(data)
        except OSError as exc:
            raise CollectorIOError.writing(self.path, exc) from exc
        self.bytes_written += len(data)
        return len(data)

    def commit(self) -> Path:
        """Flush, close and rename the staging file over the target."""
        if self._fh is None:
            raise RuntimeError('staging file is not open')
        try:
            self._fh.flush()
            os.fsync(self._fh.fileno())
            self._fh.close()
            self._fh = None
            os.chmod(self.path, self._target_mode())
            os.replace(self.path, self._target)
        except OSError as exc:
            raise CollectorIOError.writing(self._target, exc) from exc
        self._committed = True
        trace_io(self._log, 'staging committed', path=str(self._target))
        return self._target

    def discard(self) -> None:
        """Close and remove the staging file; a no-op once committed."""
        if self._committed or self._path is None:
            return
        if self._fh is not None:
            try:
                self._fh.close()
            except OSError as exc:
                self._log.warning('⚠  could not close %s: %s', self._path, exc)
            self._fh = None
        try:
            self._path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            self._log.warning('⚠  could not delete %s: %s', self._path, exc)
        else:
            trace_io(self._log, 'staging discarded', path=str(self._path))

    def _target_mode(self) -> int:
        try:
            return stat.S_IMODE(os.stat(self._target).st_mode)
        except FileNotFoundError:
            return CREATE_MODE & ~_current_umask()


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask
