from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from filecount.core.errors import FileTaskError
from filecount.io.line_counter import count_lines
from filecount.io.task import FileTask


class _FailingStream(io.RawIOBase):
    """Yields one chunk, then fails like a disk read error."""

    def __init__(self) -> None:
        self._calls = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        self._calls += 1
        if self._calls == 1:
            return b"a\nb\n"
        raise OSError(5, "Input/output error")


# --------------------------------------------------------------------------- #
#  1. Line counter                                                            #
# --------------------------------------------------------------------------- #
class LineCounterTests(unittest.TestCase):
    def test_empty_stream_is_zero(self) -> None:
        self.assertEqual(count_lines(io.BytesIO(b"")), 0)

    def test_no_newline_is_zero(self) -> None:
        self.assertEqual(count_lines(io.BytesIO(b"just one line")), 0)

    def test_trailing_segment_not_counted(self) -> None:
        self.assertEqual(count_lines(io.BytesIO(b"a\nb\nc")), 2)
        self.assertEqual(count_lines(io.BytesIO(b"a\nb\nc\n")), 3)

    def test_counts_newlines_across_chunk_boundaries(self) -> None:
        data = b"ab\n" * 1000
        for chunk_size in (1, 2, 3, 7, 4096):
            with self.subTest(chunk_size=chunk_size):
                self.assertEqual(count_lines(io.BytesIO(data), chunk_size=chunk_size), 1000)

    def test_crlf_counts_once(self) -> None:
        self.assertEqual(count_lines(io.BytesIO(b"one\r\ntwo\r\n")), 2)

    def test_read_error_propagates(self) -> None:
        with self.assertRaises(OSError):
            count_lines(_FailingStream())

    def test_rejects_non_positive_chunk(self) -> None:
        with self.assertRaises(ValueError):
            count_lines(io.BytesIO(b"a\n"), chunk_size=0)


# --------------------------------------------------------------------------- #
#  2. File task                                                               #
# --------------------------------------------------------------------------- #
class FileTaskTests(unittest.TestCase):
    def test_metrics_for_regular_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            fp = Path(td, "main.go")
            fp.write_bytes(b"package main\n\nfunc main() {}\n")
            info = FileTask(fp, fp.stat().st_size, ".go").run()
            self.assertEqual(info.lines, 3)
            self.assertEqual(info.size, 29)
            self.assertEqual(info.extension, ".go")
            self.assertEqual(info.path, fp)

    def test_zero_byte_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            fp = Path(td, "empty.txt")
            fp.write_bytes(b"")
            info = FileTask(fp, 0, ".txt").run()
            self.assertEqual((info.lines, info.size), (0, 0))

    def test_size_comes_from_discovery(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            fp = Path(td, "grown.txt")
            fp.write_bytes(b"a\nb\n")
            info = FileTask(fp, 1, ".txt").run()
            self.assertEqual(info.size, 1)
            self.assertEqual(info.lines, 2)

    def test_missing_file_raises_task_error(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            fp = Path(td, "gone.txt")
            with self.assertRaises(FileTaskError) as ctx:
                FileTask(fp, 10, ".txt").run()
            self.assertEqual(ctx.exception.path, fp)
            self.assertIsInstance(ctx.exception.cause, FileNotFoundError)
            self.assertIn("gone.txt", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
