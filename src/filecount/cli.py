from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, NoReturn, Optional, Sequence

from filecount.constants import DEFAULT_CONFIG_FILE
from filecount.core.errors import ConfigError
from filecount.logging.factory import DefaultLoggerFactory
from filecount.logging.helpers import get_logger
from filecount.rendering.printer import ReportPrinter
from filecount.runtime.config import load_config
from filecount.runtime.runner import ScanRunner


logger = get_logger('filecount')


def _configure_logging(enable_json: bool, level: int = logging.WARNING) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    mode = (bool(enable_json), int(level))
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    lg = factory.get_logger('filecount')
    global logger
    logger = lg
    setattr(_configure_logging, '_configured_mode', mode)


def _build_parser() -> argparse.ArgumentParser:
    from filecount import __version__

    parser = argparse.ArgumentParser(
        prog='filecount',
        description='Count files, lines and bytes per extension under a directory tree.',
    )
    parser.add_argument('--root', default=None, help='root directory to scan (overrides the config file)')
    parser.add_argument(
        '--config',
        default=None,
        help=f'JSON configuration file (default: {DEFAULT_CONFIG_FILE} when present)',
    )
    parser.add_argument('--skip', action='append', default=[], metavar='NAME',
                        help='directory name to skip (repeatable)')
    parser.add_argument('--ext', action='append', default=[], metavar='EXT',
                        help='extension to include, e.g. .go (repeatable; default: all)')
    parser.add_argument('--print-value', type=int, default=None, metavar='N',
                        help='itemize files with at least N lines (or bytes with --by-size); <= 0 disables')
    parser.add_argument('--by-size', action='store_true', default=None,
                        help='compare --print-value against file size instead of line count')
    parser.add_argument('--workers', type=int, default=None, metavar='N',
                        help='number of worker threads (default: FILECOUNT_WORKERS or CPU based)')
    parser.add_argument('--json-logs', action='store_true', help='emit logs as JSON lines')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='more logging (-v info, -vv debug)')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


class FileCount:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run a scan for an argv-like sequence and return the rendered report.

        Raises:
            ConfigError: when the configuration is missing or invalid.
        """
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('FILECOUNT_JSON_LOGS') == '1'
        level = {0: logging.WARNING, 1: logging.INFO}.get(ns.verbose, logging.DEBUG)
        _configure_logging(json_logs, level)

        config_file: Optional[str] = ns.config or DEFAULT_CONFIG_FILE
        cfg = load_config(
            config_file,
            required=ns.config is not None,
            root=ns.root,
            skip=ns.skip,
            ext=ns.ext,
            print_value=ns.print_value,
            by_size=ns.by_size,
            workers=ns.workers,
        )

        outcome = ScanRunner().run(cfg)
        return ReportPrinter().render(outcome.report_set, outcome.errors, execution=outcome.execution)


def main(argv: Optional[List[str]] = None) -> NoReturn:
    """Entry point for the `filecount` console script and `python -m filecount`."""
    try:
        sys.stdout.write(FileCount.run(sys.argv[1:] if argv is None else argv))
        sys.stdout.flush()
        raise SystemExit(0)
    except ConfigError as exc:
        logger.error('%s', exc)
        raise SystemExit(2)
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


if __name__ == '__main__':
    main()
