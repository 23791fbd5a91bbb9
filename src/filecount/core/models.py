from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple


class SelectMode(str, Enum):
    """Which metric the selection threshold is compared against."""

    LINES = 'lines'
    SIZE = 'size'


@dataclass(frozen=True)
class FileInfo:
    """Metrics of one scanned file. Produced once by a task, never mutated."""
    path: Path
    size: int
    lines: int
    extension: str

    def __str__(self) -> str:
        return f'Path = {self.path}; Size = {self.size}; LineCount = {self.lines}'


@dataclass
class GroupFileInfo:
    """Running totals for a group of files (one extension, or everything)."""
    count: int = 0
    size: int = 0
    lines: int = 0

    def add(self, info: FileInfo) -> None:
        self.count += 1
        self.size += info.size
        self.lines += info.lines


@dataclass(frozen=True)
class ReportSet:
    """Aggregated outcome of a scan."""
    by_extension: Mapping[str, GroupFileInfo]
    total: GroupFileInfo
    selected: Tuple[FileInfo, ...] = ()


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan parameters, loaded once before traversal starts."""
    root: Path
    skip_dirs: Sequence[str] = ()
    extensions: Sequence[str] = ()
    select_mode: SelectMode = SelectMode.LINES
    select_threshold: Optional[int] = None
    workers: Optional[int] = None
