from __future__ import annotations

"""
Bounded worker pool with a single result collector.

Tasks run on a fixed-size ThreadPoolExecutor. A bounded semaphore caps how
many tasks may be submitted but not yet finished, so the walker blocks
briefly instead of queueing the whole tree (and the number of files open at
once stays below the cap).

Workers never touch the result containers. Every outcome is put on one
queue.Queue, and a dedicated collector thread is the only code that appends
to ``results`` and ``errors``. ``wait()`` shuts the executor down, then
pushes a stop marker behind the last outcome and joins the collector.
"""

import logging
import os
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple, Union

from filecount.constants import PENDING_PER_WORKER
from filecount.core.errors import FileTaskError, PoolStateError, ScanError
from filecount.core.interfaces.pool import WorkerPoolProtocol
from filecount.core.interfaces.task import TaskProtocol
from filecount.core.models import FileInfo
from filecount.logging.helpers import get_logger, trace_io

_Outcome = Tuple[str, Union[FileInfo, ScanError, None]]

_RESULT = 'result'
_ERROR = 'error'
_STOP = 'stop'


def default_workers() -> int:
    """Worker count from FILECOUNT_WORKERS, else the ThreadPoolExecutor default."""
    raw = os.getenv('FILECOUNT_WORKERS', '').strip()
    if raw:
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if value > 0:
            return value
        get_logger('pool').warning('⚠  ignoring invalid FILECOUNT_WORKERS=%r', raw)
    return min(32, (os.cpu_count() or 1) + 4)


class WorkerPool(WorkerPoolProtocol):
    """Run tasks with bounded parallelism and collect their outcomes."""

    def __init__(
        self,
        workers: Optional[int] = None,
        *,
        max_pending: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._workers = workers if workers and workers > 0 else default_workers()
        self._max_pending = max_pending if max_pending and max_pending > 0 else self._workers * PENDING_PER_WORKER
        self._log = logger or get_logger('pool')

        self._slots = threading.BoundedSemaphore(self._max_pending)
        self._outcomes: 'queue.Queue[_Outcome]' = queue.Queue()
        self._results: List[FileInfo] = []
        self._errors: List[ScanError] = []
        self._submitted = 0
        self._waited = False

        self._executor = ThreadPoolExecutor(
            max_workers=self._workers,
            thread_name_prefix='filecount-worker',
        )
        self._collector = threading.Thread(
            target=self._collect,
            name='filecount-collector',
            daemon=True,
        )
        self._collector.start()
        self._log.debug('worker pool started: workers=%d max_pending=%d', self._workers, self._max_pending)

    @property
    def workers(self) -> int:
        return self._workers

    @property
    def submitted(self) -> int:
        return self._submitted

    def submit(self, task: TaskProtocol) -> None:
        if self._waited:
            raise PoolStateError('submit() called after wait()')
        self._slots.acquire()
        try:
            self._executor.submit(self._execute, task)
        except BaseException:
            self._slots.release()
            raise
        self._submitted += 1

    def report_error(self, error: ScanError) -> None:
        if self._waited:
            raise PoolStateError('report_error() called after wait()')
        self._outcomes.put((_ERROR, error))

    def wait(self) -> None:
        if self._waited:
            return
        self._waited = True
        self._executor.shutdown(wait=True)
        self._outcomes.put((_STOP, None))
        self._collector.join()
        self._log.debug(
            'worker pool drained: submitted=%d results=%d errors=%d',
            self._submitted, len(self._results), len(self._errors),
        )

    @property
    def results(self) -> List[FileInfo]:
        if not self._waited:
            raise PoolStateError('results are only available after wait()')
        return self._results

    @property
    def errors(self) -> List[ScanError]:
        if not self._waited:
            raise PoolStateError('errors are only available after wait()')
        return self._errors

    def __enter__(self) -> 'WorkerPool':
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.wait()
        return False

    def _execute(self, task: TaskProtocol) -> None:
        try:
            outcome: _Outcome = (_RESULT, task.run())
        except ScanError as exc:
            outcome = (_ERROR, exc)
        except Exception as exc:
            self._log.exception('unexpected failure while processing %s', task.path)
            outcome = (_ERROR, FileTaskError(task.path, exc))
        try:
            self._outcomes.put(outcome)
        finally:
            self._slots.release()

    def _collect(self) -> None:
        while True:
            kind, payload = self._outcomes.get()
            if kind == _STOP:
                return
            if kind == _RESULT:
                self._results.append(payload)
                trace_io(self._log, 'collected result', path=str(payload.path), lines=payload.lines)
            else:
                self._errors.append(payload)
                self._log.debug('collected error: %s', payload)
