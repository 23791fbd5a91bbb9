from __future__ import annotations
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from filecount.core.models import FileInfo


@runtime_checkable
class TaskProtocol(Protocol):
    """One unit of work executed by the worker pool."""

    @property
    def path(self) -> Optional[Path]:
        """Path the task works on, used to tag unexpected failures."""
        ...

    def run(self) -> FileInfo:
        """Compute the metrics, raising a ScanError on failure."""
        ...
