from __future__ import annotations

"""Lazy recursive discovery of files whose name matches a glob.

Traversal is pre-order and depth-first in directory-listing order: a
subdirectory is entered at the point where it is listed, so the yielded
order is the one `find DIR -type f -name PATTERN` reports. Symbolic
links are neither followed nor reported.
"""

import logging
import os
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from codecollector.core.errors import CollectorIOError
from codecollector.core.interfaces import WalkerProtocol
from codecollector.logging.helpers import get_logger, trace_io


class FileWalker(WalkerProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('io.walker')

    def iter_matches(self, root: Path, pattern: str, *, skip: Optional[Path] = None) -> Iterator[Path]:
        """Yield regular files below *root* whose basename matches *pattern*.

        Args:
            root: Directory to walk. Must exist.
            pattern: Case-sensitive glob applied to the file name only.
            skip: A file that must never be reported (e.g. the staging file).

        Raises:
            CollectorIOError: *root* is missing or cannot be listed.
        """
        if not root.is_dir():
            raise CollectorIOError(f'{root} is not a directory', path=root)
        skip_id = self._identity(skip) if skip is not None else None
        return self._walk(str(root), pattern, skip_id)

    def _walk(self, top: str, pattern: str, skip_id: Optional[Tuple[int, int]]) -> Iterator[Path]:
        try:
            entries = self._list_dir(top)
        except OSError as exc:
            raise CollectorIOError(f'could not list {top}: {exc.strerror or exc}',
                                   path=Path(top), cause=exc) from exc

        # One iterator per open directory; the innermost is consumed first.
        stack: List[Iterator[os.DirEntry]] = [iter(entries)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            try:
                if entry.is_dir(follow_symlinks=False):
                    stack.append(iter(self._list_dir(entry.path)))
                    continue
                if not entry.is_file(follow_symlinks=False):
                    continue
            except OSError as exc:
                self._log.warning('⚠  %s could not be listed (%s) – skipped', entry.path, exc.strerror or exc)
                continue
            if not fnmatchcase(entry.name, pattern):
                continue
            if skip_id is not None and self._is_same(entry, skip_id):
                continue
            trace_io(self._log, 'match', path=entry.path)
            yield Path(entry.path)

    @staticmethod
    def _list_dir(dirpath: str) -> List[os.DirEntry]:
        with os.scandir(dirpath) as it:
            return list(it)

    @staticmethod
    def _identity(path: Path) -> Optional[Tuple[int, int]]:
        try:
            st = os.stat(path, follow_symlinks=False)
        except FileNotFoundError:
            return None
        return (st.st_dev, st.st_ino)

    @staticmethod
    def _is_same(entry: os.DirEntry, ident: Tuple[int, int]) -> bool:
        if entry.inode() != ident[1]:
            return False
        return entry.stat(follow_symlinks=False).st_dev == ident[0]
