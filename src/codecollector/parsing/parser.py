# codecollector/parsing/parser.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from codecollector.constants import DEFAULT_EXTENSION, DEFAULT_OUTPUT
from codecollector.core.errors import UsageError
from codecollector.core.models import CollectorConfig, resolve_output_path


class _CollectorArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    `-h` is a regular flag here: the caller prints the usage and exits
    with status 1, as for any other usage error.
    """
    p = _CollectorArgumentParser(
        prog='codecollector',
        formatter_class=argparse.RawTextHelpFormatter,
        usage='%(prog)s [-e extension] [-o output_file] [-r] [-h]',
        add_help=False,
        description=(
            'Collect every file with a given extension below the current directory\n'
            'into one output file, each preceded by a [FILE_PATH] marker line.'
        ),
    )
    p.add_argument(
        '-e',
        metavar='extension',
        dest='extension',
        default=DEFAULT_EXTENSION,
        help=f'Specify file extension (default: {DEFAULT_EXTENSION})',
    )
    p.add_argument(
        '-o',
        metavar='output_file',
        dest='output',
        default=DEFAULT_OUTPUT,
        help=f'Specify output file (default: {DEFAULT_OUTPUT})',
    )
    p.add_argument(
        '-r',
        action='store_true',
        dest='remove_empty_lines',
        help='Remove empty lines',
    )
    p.add_argument(
        '-h',
        action='store_true',
        dest='help',
        help='Display help information',
    )
    return p


def usage_text() -> str:
    return _build_parser().format_help()


def parse_config(argv: Sequence[str], *, cwd: Optional[Path] = None) -> CollectorConfig:
    """Turn *argv* into an immutable CollectorConfig.

    Raises:
        UsageError: malformed arguments, or `-h` (``help_requested`` set).
    """
    ns = _build_parser().parse_args(list(argv))
    if ns.help:
        raise UsageError('help requested', help_requested=True)

    # "-e .py" is accepted as "-e py".
    extension = ns.extension[1:] if ns.extension.startswith('.') else ns.extension
    base = Path(cwd) if cwd is not None else Path.cwd()
    return CollectorConfig(
        extension=extension,
        output=resolve_output_path(ns.output, base),
        remove_empty_lines=ns.remove_empty_lines,
        root=base,
    )
