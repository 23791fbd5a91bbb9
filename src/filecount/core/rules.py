from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from filecount.core.models import ScanConfig
from filecount.utils.suffixes import is_extension_allowed, normalize_extensions


@dataclass(frozen=True)
class RuleSet:
    """Skip/allow rules consulted by the walker.

    Built once before traversal and shared read-only by every worker, so it
    is a frozen value holding frozensets.
    """
    skip_dirs: FrozenSet[str] = frozenset()
    extensions: FrozenSet[str] = frozenset()

    @classmethod
    def from_config(cls, cfg: ScanConfig) -> 'RuleSet':
        return cls(
            skip_dirs=frozenset(d for d in cfg.skip_dirs if d),
            extensions=frozenset(normalize_extensions(cfg.extensions)),
        )

    def is_dir_skipped(self, name: str) -> bool:
        """Exact base-name match, never a path or a glob."""
        return name in self.skip_dirs

    def is_extension_processed(self, extension: str) -> bool:
        return is_extension_allowed(extension, self.extensions)
