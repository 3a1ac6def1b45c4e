from __future__ import annotations

import os
import sys
from typing import NoReturn, Optional, Sequence

from codecollector.collector import Collector
from codecollector.core.errors import CollectorError, UsageError
from codecollector.core.report import CollectionReport
from codecollector.logging.factory import DefaultLoggerFactory
from codecollector.logging.helpers import get_logger
from codecollector.parsing.parser import parse_config, usage_text

logger = get_logger('codecollector')


def _configure_logging(factory: Optional[DefaultLoggerFactory] = None) -> None:
    """Configure process-wide logging once per (json, level) mode."""
    factory = factory or DefaultLoggerFactory.from_env()
    if getattr(_configure_logging, '_configured_mode', None) == factory.mode:
        return
    global logger
    logger = factory.get_logger('codecollector')
    setattr(_configure_logging, '_configured_mode', factory.mode)


class CodeCollector:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> CollectionReport:
        """Parse *argv*, run the collection and return its report.

        Raises:
            UsageError, NoMatchError, CollectorIOError: see `main` for exit codes.
        """
        _configure_logging()
        config = parse_config(argv)
        logger.debug('collecting *.%s under %s into %s', config.extension, config.root, config.output)
        return Collector(logger=get_logger('collector')).run(config)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `codecollector` and `python -m codecollector`."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        report = CodeCollector.run(args)
    except UsageError as exc:
        if not exc.help_requested:
            logger.error('%s', exc)
        print(usage_text(), end='')
        raise SystemExit(1)
    except CollectorError as exc:
        logger.error('%s', exc)
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)

    print('Code collection complete!')
    print(f'Output file: {report.output}')
    raise SystemExit(0)


if __name__ == '__main__':
    main()
