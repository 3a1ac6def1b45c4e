# src/codecollector/processing/line_ops.py
from typing import AnyStr, Iterable, List


def is_blank(line: AnyStr) -> bool:
    """True when *line* is empty or made only of whitespace (terminator included)."""
    return not line.strip()


def remove_blank_lines(lines: Iterable[AnyStr]) -> List[AnyStr]:
    """Drop blank lines, keeping every other line unchanged and in order.

    Works on `str` and `bytes` lines alike.
    """
    return [ln for ln in lines if not is_blank(ln)]
