from __future__ import annotations
from typing import Optional, Protocol, Sequence, runtime_checkable

from filecount.core.errors import ScanError
from filecount.core.models import ReportSet
from filecount.core.report import ExecutionReport


@runtime_checkable
class PrinterProtocol(Protocol):
    """Turns a finished scan into text."""

    def render(
        self,
        report_set: ReportSet,
        errors: Sequence[ScanError],
        *,
        execution: Optional[ExecutionReport] = None,
    ) -> str:
        """Return the full textual report."""
        ...
