from __future__ import annotations

__version__ = '1.0.0'

from codecollector.constants import FILE_PATH_MARKER
from codecollector.cli import CodeCollector, main
from codecollector.collector import Collector, marker_line
from codecollector.core.errors import CollectorError, CollectorIOError, NoMatchError, UsageError
from codecollector.core.models import CollectorConfig
from codecollector.core.report import CollectionReport
from codecollector.io.walker import FileWalker
from codecollector.logging.helpers import get_logger
from codecollector.parsing.parser import _build_parser, parse_config
from codecollector.processing.line_ops import remove_blank_lines

__all__ = [
    'CodeCollector',
    'Collector',
    'CollectorConfig',
    'CollectionReport',
    'CollectorError',
    'CollectorIOError',
    'NoMatchError',
    'UsageError',
    'FILE_PATH_MARKER',
    'FileWalker',
    'get_logger',
    'main',
    'marker_line',
    'parse_config',
    'remove_blank_lines',
    '_build_parser',
]
