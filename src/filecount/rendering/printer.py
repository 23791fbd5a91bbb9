"""
Text report for a finished scan.

Sections, in order:
  • Files:                 – files picked by the selector, fewest lines first
  • Errors:                – one line per traversal or file error
  • File count by suffix:  – one line per extension
  • Total file info:       – grand total
  • Execution time         – only when an ExecutionReport is supplied

Byte counts are rendered with binary units through format_size; the core
itself only carries integers.
"""

import logging
from typing import List, Optional, Sequence

from filecount.core.errors import ScanError
from filecount.core.interfaces.render import PrinterProtocol
from filecount.core.models import FileInfo, GroupFileInfo, ReportSet
from filecount.core.report import ExecutionReport
from filecount.logging.helpers import get_logger
from filecount.utils.bytesize import format_size

NO_EXTENSION_LABEL = '<none>'


class ReportPrinter(PrinterProtocol):
    """Render a ReportSet and its errors as plain text."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('render')

    @staticmethod
    def format_file(info: FileInfo) -> str:
        return f'Path = {info.path}; Size = {format_size(info.size)}; LineCount = {info.lines}'

    @staticmethod
    def format_group(group: GroupFileInfo) -> str:
        return f'count = {group.count}; size = {format_size(group.size)}; lines = {group.lines}'

    def render(
        self,
        report_set: ReportSet,
        errors: Sequence[ScanError],
        *,
        execution: Optional[ExecutionReport] = None,
    ) -> str:
        out: List[str] = ['Files:']
        out.extend(self.format_file(info) for info in report_set.selected)

        out.append('Errors:')
        out.extend(f'Error: {err}' for err in errors)

        out.append('File count by suffix:')
        for ext, group in report_set.by_extension.items():
            out.append(f'{ext or NO_EXTENSION_LABEL} => {self.format_group(group)}')

        out.append('Total file info:')
        out.append(self.format_group(report_set.total))

        if execution is not None and execution.duration_s is not None:
            out.append(f'Execution time = {execution.duration_s:.3f}s')

        self._log.debug('rendered report: %d lines', len(out))
        return '\n'.join(out) + '\n'
