from __future__ import annotations

"""Exception hierarchy for filecount.

Per-path failures (``ScanError`` subclasses) are values collected by the
worker pool and reported at the end of a run. ``ConfigError`` is fatal and is
raised before any traversal starts.
"""

from pathlib import Path
from typing import Optional


class FileCountError(Exception):
    """Base class for every error raised by filecount."""


class ConfigError(FileCountError):
    """Configuration is missing, unreadable or invalid."""


class PoolStateError(FileCountError):
    """The worker pool was used out of order (e.g. results before wait())."""


class ScanError(FileCountError):
    """A failure tied to one filesystem path.

    Attributes:
        path: The path the failure belongs to, when known.
        cause: The underlying exception (usually an ``OSError``).
    """

    kind = 'scan'

    def __init__(self, path: Optional[Path], cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(path, cause)

    def __str__(self) -> str:
        where = str(self.path) if self.path is not None else '<unknown>'
        return f'{where}: {self.cause}'


class TraversalError(ScanError):
    """Listing a directory, or reading an entry's metadata, failed."""

    kind = 'traversal'


class FileTaskError(ScanError):
    """Opening or reading a file for metrics failed."""

    kind = 'file'
