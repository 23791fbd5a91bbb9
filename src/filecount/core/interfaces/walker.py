from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable

from filecount.core.interfaces.pool import WorkerPoolProtocol
from filecount.core.rules import RuleSet


@runtime_checkable
class WalkerProtocol(Protocol):
    """Abstract directory walker feeding a worker pool."""

    def walk(self, root: Path, rules: RuleSet, pool: WorkerPoolProtocol) -> int:
        """Submit one task per eligible file under *root*; return the number submitted."""
        ...
