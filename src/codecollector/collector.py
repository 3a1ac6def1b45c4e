from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from codecollector.constants import BLOCK_SEPARATOR, FILE_PATH_MARKER
from codecollector.core.errors import NoMatchError
from codecollector.core.interfaces import WalkerProtocol
from codecollector.core.models import CollectorConfig
from codecollector.core.report import CollectionReport, StageTimer
from codecollector.io.readers import SourceReader
from codecollector.io.staging import StagingFile
from codecollector.io.walker import FileWalker
from codecollector.logging.helpers import get_logger
from codecollector.processing.line_ops import remove_blank_lines


def marker_line(path: Path) -> bytes:
    """Return the `[FILE_PATH] <path>` line written before a file body."""
    return os.fsencode(FILE_PATH_MARKER + str(path)) + b'\n'


class Collector:
    """Concatenate every matching file under a root into one output file.

    The output is assembled in a staging file next to the destination and
    only renamed over it once the whole walk succeeded. Any failure leaves
    the destination untouched and removes the staging file.
    """

    def __init__(
        self,
        *,
        walker: Optional[WalkerProtocol] = None,
        reader: Optional[SourceReader] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('collector')
        self._walker = walker or FileWalker(logger=get_logger('io.walker'))
        self._reader = reader or SourceReader(logger=get_logger('io.readers'))

    def run(self, config: CollectorConfig) -> CollectionReport:
        """Collect files according to *config* and return the run report.

        Raises:
            NoMatchError: no file under the root matched the extension.
            CollectorIOError: a source could not be read or the output written.
        """
        cfg = config.resolved()
        report = CollectionReport(extension=cfg.extension, output=cfg.output)

        with StagingFile(cfg.output, logger=get_logger('io.staging')) as staging:
            with StageTimer(report, 'walk'):
                for fp in self._walker.iter_matches(cfg.root, cfg.pattern, skip=staging.path):
                    self._append(staging, fp, cfg, report)

            if not report.files:
                raise NoMatchError(cfg.extension)

            with StageTimer(report, 'commit'):
                staging.commit()
            report.bytes_written = staging.bytes_written

        report.finish()
        self._log.info('collected %s → %s', report.summary(), cfg.output)
        return report

    def _append(self, staging: StagingFile, fp: Path, cfg: CollectorConfig, report: CollectionReport) -> None:
        abs_path = fp.resolve()
        lines = self._reader.read_lines(fp)
        read = sum(len(ln) for ln in lines)
        if cfg.remove_empty_lines:
            lines = remove_blank_lines(lines)

        staging.write(marker_line(abs_path))
        staging.write(b''.join(lines))
        staging.write(BLOCK_SEPARATOR)

        report.add_file(abs_path, read=read)
        self._log.debug('+ %s (%d bytes)', abs_path, read)
