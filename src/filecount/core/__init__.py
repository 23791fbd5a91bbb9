from __future__ import annotations

"""Public surface for filecount.core.

Data types, rules, the selector and the aggregator. Everything here is
single-threaded and free of I/O; the concurrent parts live in
filecount.io and filecount.runtime.
"""

from filecount.core.aggregator import aggregate, sort_results
from filecount.core.models import FileInfo, GroupFileInfo, ReportSet, ScanConfig, SelectMode
from filecount.core.rules import RuleSet
from filecount.core.selector import Selector

__all__ = [
    "FileInfo",
    "GroupFileInfo",
    "ReportSet",
    "RuleSet",
    "ScanConfig",
    "SelectMode",
    "Selector",
    "aggregate",
    "sort_results",
]
