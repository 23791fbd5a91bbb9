from __future__ import annotations
from typing import List, Protocol, runtime_checkable

from filecount.core.errors import ScanError
from filecount.core.interfaces.task import TaskProtocol
from filecount.core.models import FileInfo


@runtime_checkable
class WorkerPoolProtocol(Protocol):
    """Bounded executor that funnels task outcomes into one collector."""

    def submit(self, task: TaskProtocol) -> None:
        """Schedule *task*; may block while the in-flight bound is reached."""
        ...

    def report_error(self, error: ScanError) -> None:
        """Record an error produced outside of a task (e.g. by the walker)."""
        ...

    def wait(self) -> None:
        """Block until every submitted task finished and was collected."""
        ...

    @property
    def results(self) -> List[FileInfo]:
        """Collected metrics; only available after wait()."""
        ...

    @property
    def errors(self) -> List[ScanError]:
        """Collected errors; only available after wait()."""
        ...
