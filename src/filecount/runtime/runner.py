from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from filecount.core.aggregator import aggregate
from filecount.core.errors import ScanError
from filecount.core.interfaces import WalkerProtocol, WorkerPoolProtocol
from filecount.core.models import ReportSet, ScanConfig
from filecount.core.report import ExecutionReport, StageTimer
from filecount.core.rules import RuleSet
from filecount.core.selector import Selector
from filecount.io.walker import FileWalker
from filecount.logging.helpers import get_logger
from filecount.runtime.pool import WorkerPool

PoolFactory = Callable[[Optional[int]], WorkerPoolProtocol]


@dataclass(frozen=True)
class ScanOutcome:
    """Everything a printer needs: the aggregated report and the raw errors."""
    report_set: ReportSet
    errors: List[ScanError]
    execution: ExecutionReport


class ScanRunner:
    """Wire walker, worker pool and aggregator for one scan."""

    def __init__(
        self,
        *,
        walker: Optional[WalkerProtocol] = None,
        pool_factory: Optional[PoolFactory] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._log = logger or get_logger('runner')
        self._walker = walker or FileWalker()
        self._pool_factory = pool_factory or (lambda workers: WorkerPool(workers))

    def run(self, cfg: ScanConfig) -> ScanOutcome:
        rules = RuleSet.from_config(cfg)
        selector = Selector.from_config(cfg)
        execution = ExecutionReport(root=str(cfg.root))

        pool = self._pool_factory(cfg.workers)
        execution.workers = getattr(pool, 'workers', cfg.workers or 0)
        self._log.info('scanning %s', cfg.root)

        try:
            with StageTimer(execution, 'walk'):
                execution.tasks_submitted = self._walker.walk(cfg.root, rules, pool)
        finally:
            with StageTimer(execution, 'wait'):
                pool.wait()

        results = pool.results
        errors = sorted(pool.errors, key=lambda e: str(e.path))
        with StageTimer(execution, 'aggregate'):
            report_set = aggregate(results, selector)

        execution.results_total = len(results)
        for err in errors:
            execution.add_error(err.kind, str(err))
        execution.finish()

        self._log.info(
            'scan finished: %d files, %d errors in %.3fs',
            execution.results_total, execution.errors_total, execution.duration_s,
        )
        return ScanOutcome(report_set=report_set, errors=errors, execution=execution)


def run_scan(cfg: ScanConfig, *, logger: Optional[logging.Logger] = None) -> ScanOutcome:
    """Run a scan with the default walker and worker pool."""
    return ScanRunner(logger=logger).run(cfg)
