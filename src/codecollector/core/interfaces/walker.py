from __future__ import annotations
from pathlib import Path
from typing import Iterator, Optional, Protocol, runtime_checkable


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract file walker."""

    def iter_matches(self, root: Path, pattern: str, *, skip: Optional[Path] = None) -> Iterator[Path]:
        """Yield regular files under *root* whose name matches *pattern*, in walk order."""
        ...
