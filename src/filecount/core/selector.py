from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from filecount.core.models import FileInfo, ScanConfig, SelectMode


@dataclass(frozen=True)
class Selector:
    """Decide which files are itemized in the report.

    A missing or non-positive threshold disables selection. Otherwise a file
    qualifies when its line count (``SelectMode.LINES``) or byte size
    (``SelectMode.SIZE``) reaches the threshold.
    """
    mode: SelectMode = SelectMode.LINES
    threshold: Optional[int] = None

    @classmethod
    def from_config(cls, cfg: ScanConfig) -> 'Selector':
        return cls(mode=cfg.select_mode, threshold=cfg.select_threshold)

    @property
    def enabled(self) -> bool:
        return self.threshold is not None and self.threshold > 0

    def __call__(self, info: FileInfo) -> bool:
        if not self.enabled:
            return False
        if self.mode is SelectMode.SIZE:
            return self.threshold <= info.size
        return self.threshold <= info.lines
