from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from filecount.core.models import FileInfo, GroupFileInfo, ReportSet

SelectorFn = Callable[[FileInfo], bool]


def sort_results(results: Iterable[FileInfo]) -> List[FileInfo]:
    """Order by line count ascending, ties broken by path.

    The path tie-break makes the order independent of task completion order.
    """
    return sorted(results, key=lambda info: (info.lines, str(info.path)))


def aggregate(results: Iterable[FileInfo], selector: SelectorFn) -> ReportSet:
    """Group *results* by extension, compute the grand total and pick the
    files *selector* wants itemized.

    The fold runs single-threaded over the sorted input, so the same input
    always yields an equal ReportSet.
    """
    groups: Dict[str, GroupFileInfo] = {}
    total = GroupFileInfo()
    selected: List[FileInfo] = []

    for info in sort_results(results):
        if selector(info):
            selected.append(info)
        groups.setdefault(info.extension, GroupFileInfo()).add(info)
        total.add(info)

    return ReportSet(
        by_extension=dict(sorted(groups.items())),
        total=total,
        selected=tuple(selected),
    )
