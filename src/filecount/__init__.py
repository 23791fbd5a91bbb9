from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from filecount.cli import FileCount
from filecount.core.aggregator import aggregate
from filecount.core.errors import (
    ConfigError,
    FileCountError,
    FileTaskError,
    PoolStateError,
    ScanError,
    TraversalError,
)
from filecount.core.models import FileInfo, GroupFileInfo, ReportSet, ScanConfig, SelectMode
from filecount.core.rules import RuleSet
from filecount.core.selector import Selector
from filecount.io.walker import FileWalker
from filecount.rendering.printer import ReportPrinter
from filecount.runtime.config import build_config, load_config
from filecount.runtime.pool import WorkerPool
from filecount.runtime.runner import ScanOutcome, ScanRunner, run_scan

__version__ = '1.0.0'


def scan(
    root: str | Path,
    *,
    skip: Sequence[str] = (),
    ext: Sequence[str] = (),
    print_value: Optional[int] = None,
    by_size: bool = False,
    workers: Optional[int] = None,
) -> ScanOutcome:
    """Programmatic one-call scan without a configuration file."""
    cfg = build_config(
        root=root,
        skip=skip,
        ext=ext,
        print_value=print_value,
        by_size=by_size,
        workers=workers,
    )
    return run_scan(cfg)


__all__ = [
    'ConfigError',
    'FileCount',
    'FileCountError',
    'FileInfo',
    'FileTaskError',
    'FileWalker',
    'GroupFileInfo',
    'PoolStateError',
    'ReportPrinter',
    'ReportSet',
    'RuleSet',
    'ScanConfig',
    'ScanError',
    'ScanOutcome',
    'ScanRunner',
    'Selector',
    'SelectMode',
    'TraversalError',
    'WorkerPool',
    'aggregate',
    'build_config',
    'load_config',
    'run_scan',
    'scan',
]
