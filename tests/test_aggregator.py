from __future__ import annotations

import random
import unittest
from pathlib import Path

from filecount.core.aggregator import aggregate, sort_results
from filecount.core.models import FileInfo, GroupFileInfo, SelectMode
from filecount.core.selector import Selector


def _fi(name: str, lines: int, size: int) -> FileInfo:
    ext = name[name.rfind("."):] if "." in name else ""
    return FileInfo(path=Path("/tree") / name, size=size, lines=lines, extension=ext)


SAMPLE = [
    _fi("a.cpp", 3, 6),
    _fi("b.java", 5, 10),
    _fi("c.go", 7, 14),
    _fi("d.js", 9, 18),
]


class AggregatorTests(unittest.TestCase):
    def test_example_totals(self) -> None:
        rs = aggregate(SAMPLE, Selector())
        self.assertEqual(rs.total, GroupFileInfo(count=4, size=48, lines=24))
        self.assertEqual(set(rs.by_extension), {".cpp", ".java", ".go", ".js"})
        for ext, group in rs.by_extension.items():
            with self.subTest(ext=ext):
                self.assertEqual(group.count, 1)
        self.assertEqual(rs.selected, ())

    def test_groups_sum_members(self) -> None:
        items = [_fi("x.go", 2, 4), _fi("y.go", 3, 9), _fi("z.py", 1, 1), _fi("README", 4, 40)]
        rs = aggregate(items, Selector())
        self.assertEqual(rs.by_extension[".go"], GroupFileInfo(count=2, size=13, lines=5))
        self.assertEqual(rs.by_extension[""], GroupFileInfo(count=1, size=40, lines=4))
        self.assertEqual(rs.total.count, sum(g.count for g in rs.by_extension.values()))
        self.assertEqual(rs.total.size, sum(g.size for g in rs.by_extension.values()))
        self.assertEqual(rs.total.lines, sum(g.lines for g in rs.by_extension.values()))

    def test_selected_in_ascending_line_order(self) -> None:
        rs = aggregate(list(reversed(SAMPLE)), Selector(SelectMode.LINES, 5))
        self.assertEqual([i.path.name for i in rs.selected], ["b.java", "c.go", "d.js"])

    def test_select_by_size(self) -> None:
        rs = aggregate(SAMPLE, Selector(SelectMode.SIZE, 14))
        self.assertEqual([i.path.name for i in rs.selected], ["c.go", "d.js"])

    def test_ties_broken_by_path(self) -> None:
        items = [_fi("b.go", 1, 1), _fi("a.go", 1, 1), _fi("c.go", 0, 1)]
        self.assertEqual([i.path.name for i in sort_results(items)], ["c.go", "a.go", "b.go"])

    def test_independent_of_input_order(self) -> None:
        items = [_fi(f"f{i}.{ext}", i % 4, i) for i in range(40) for ext in ("go", "py")]
        sel = Selector(SelectMode.LINES, 2)
        expected = aggregate(items, sel)
        rng = random.Random(7)
        for _ in range(5):
            shuffled = list(items)
            rng.shuffle(shuffled)
            self.assertEqual(aggregate(shuffled, sel), expected)

    def test_repeatable_over_same_input(self) -> None:
        sel = Selector(SelectMode.SIZE, 10)
        self.assertEqual(aggregate(SAMPLE, sel), aggregate(SAMPLE, sel))

    def test_empty_input(self) -> None:
        rs = aggregate([], Selector(SelectMode.LINES, 1))
        self.assertEqual(rs.total, GroupFileInfo())
        self.assertEqual(dict(rs.by_extension), {})
        self.assertEqual(rs.selected, ())

    def test_input_not_mutated(self) -> None:
        items = list(reversed(SAMPLE))
        aggregate(items, Selector())
        self.assertEqual(items, list(reversed(SAMPLE)))


if __name__ == "__main__":
    unittest.main()
