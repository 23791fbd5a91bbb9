from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from filecount.core.errors import FileTaskError
from filecount.core.models import FileInfo
from filecount.io.line_counter import count_lines


@dataclass(frozen=True)
class FileTask:
    """Compute the metrics of one file discovered by the walker.

    ``size`` is the value captured from the directory entry at discovery
    time; the file is not stat'ed again.
    """
    path: Path
    size: int
    extension: str

    def run(self) -> FileInfo:
        try:
            with open(self.path, 'rb') as handle:
                lines = count_lines(handle)
        except OSError as exc:
            raise FileTaskError(self.path, exc) from exc
        return FileInfo(path=self.path, size=self.size, lines=lines, extension=self.extension)
