from __future__ import annotations

"""
Runtime execution report for a scan.

Counters are filled by the runner once the worker pool has drained, so the
report is only ever touched from the main thread. Stage timings cover
`walk` (traversal and submission), `wait` (draining the pool) and
`aggregate` (sorting and folding). `started_at` and `finished_at` are
wall-clock epoch seconds; durations use a monotonic clock.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ExecutionReport:
    started_at: float = field(default_factory=time.time)
    finished_at: float | None = None
    duration_s: float | None = None

    root: str = ""
    workers: int = 0

    tasks_submitted: int = 0
    results_total: int = 0
    errors_total: int = 0
    errors_by_kind: Dict[str, int] = field(default_factory=dict)

    time_by_stage: Dict[str, float] = field(
        default_factory=lambda: {
            "walk": 0.0,
            "wait": 0.0,
            "aggregate": 0.0,
        }
    )

    errors: List[str] = field(default_factory=list)
    _clock_start: float = field(default_factory=time.perf_counter, init=False, repr=False, compare=False)

    def add_time(self, stage: str, seconds: float) -> None:
        self.time_by_stage[stage] = self.time_by_stage.get(stage, 0.0) + seconds

    def add_error(self, kind: str, message: str) -> None:
        self.errors_total += 1
        self.errors_by_kind[kind] = self.errors_by_kind.get(kind, 0) + 1
        self.errors.append(message)

    def finish(self) -> None:
        self.finished_at = time.time()
        self.duration_s = time.perf_counter() - self._clock_start

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "started_at": self.started_at,
                "finished_at": self.finished_at,
                "duration_s": self.duration_s,
                "root": self.root,
                "workers": self.workers,
                "tasks_submitted": self.tasks_submitted,
                "results_total": self.results_total,
                "errors_total": self.errors_total,
                "errors_by_kind": self.errors_by_kind,
                "time_by_stage": self.time_by_stage,
                "errors": self.errors,
            },
            indent=indent,
        )


class StageTimer:
    def __init__(self, report: ExecutionReport, stage: str):
        self._report = report
        self._stage = stage
        self._t0: float | None = None

    def __enter__(self):
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._t0 is not None:
            self._report.add_time(self._stage, time.perf_counter() - self._t0)
        return False
