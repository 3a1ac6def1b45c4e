from __future__ import annotations

"""Public surface for codecollector.core: models, errors and protocols."""

from codecollector.core.errors import CollectorError, CollectorIOError, NoMatchError, UsageError
from codecollector.core.models import CollectorConfig, resolve_output_path
from codecollector.core.report import CollectionReport, StageTimer

__all__ = [
    'CollectorError',
    'CollectorIOError',
    'NoMatchError',
    'UsageError',
    'CollectorConfig',
    'resolve_output_path',
    'CollectionReport',
    'StageTimer',
]
