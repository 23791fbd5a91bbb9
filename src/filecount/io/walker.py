from __future__ import annotations
import logging
import os
import stat
from pathlib import Path
from typing import Callable, List, Optional

from filecount.core.errors import TraversalError
from filecount.core.interfaces import TaskProtocol, WalkerProtocol, WorkerPoolProtocol
from filecount.core.rules import RuleSet
from filecount.io.task import FileTask
from filecount.logging.helpers import get_logger, trace_io
from filecount.utils.suffixes import extension_of

TaskFactory = Callable[[Path, int, str], TaskProtocol]


class FileWalker(WalkerProtocol):
    """Depth-first traversal that turns eligible files into pool tasks.

    Directories named in ``rules.skip_dirs`` are pruned with everything
    below them. Files whose extension is not allowed are skipped silently.
    Listing failures are reported to the pool as ``TraversalError`` and the
    walk continues with the remaining directories, including when the root
    itself cannot be listed. Symlinked directories are not followed.
    Only regular files (or symlinks to them) become tasks; FIFOs, sockets
    and device nodes are skipped silently.
    The walker never reads file contents.
    """

    def __init__(
        self,
        *,
        task_factory: TaskFactory = FileTask,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._task_factory = task_factory
        self._log = logger or get_logger('io.walker')

    def walk(self, root: Path, rules: RuleSet, pool: WorkerPoolProtocol) -> int:
        root = Path(root)
        try:
            root_stat = os.stat(root)
        except OSError as exc:
            self._report(pool, root, exc)
            return 0

        if not stat.S_ISDIR(root_stat.st_mode):
            if not stat.S_ISREG(root_stat.st_mode):
                self._log.info('root %s is not a regular file – nothing to scan', root)
                return 0
            return self._offer(pool, rules, root, root.name, root_stat.st_size)

        if rules.is_dir_skipped(root.name):
            self._log.info('root %s is in the skip list – nothing to scan', root)
            return 0

        submitted = 0
        stack: List[Path] = [root]
        while stack:
            directory = stack.pop()
            try:
                with os.scandir(directory) as it:
                    entries = sorted(it, key=lambda e: e.name)
            except OSError as exc:
                self._report(pool, directory, exc)
                continue

            subdirs: List[Path] = []
            for entry in entries:
                path = Path(entry.path)
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                    linked_dir = not is_dir and entry.is_symlink() and entry.is_dir()
                except OSError as exc:
                    self._report(pool, path, exc)
                    continue

                if linked_dir:
                    trace_io(self._log, 'skip directory symlink', path=str(path))
                    continue
                if is_dir:
                    if rules.is_dir_skipped(entry.name):
                        trace_io(self._log, 'skip directory', path=str(path))
                        continue
                    subdirs.append(path)
                    continue

                extension = extension_of(entry.name)
                if not rules.is_extension_processed(extension):
                    continue
                try:
                    entry_stat = entry.stat()
                except OSError as exc:
                    self._report(pool, path, exc)
                    continue
                if not stat.S_ISREG(entry_stat.st_mode):
                    trace_io(self._log, 'skip special file', path=str(path))
                    continue
                pool.submit(self._task_factory(path, entry_stat.st_size, extension))
                submitted += 1

            # Reversed so the lexically first subdirectory is visited next.
            stack.extend(reversed(subdirs))

        self._log.debug('walk of %s submitted %d tasks', root, submitted)
        return submitted

    def _offer(self, pool: WorkerPoolProtocol, rules: RuleSet, path: Path, name: str, size: int) -> int:
        extension = extension_of(name)
        if not rules.is_extension_processed(extension):
            return 0
        pool.submit(self._task_factory(path, size, extension))
        return 1

    def _report(self, pool: WorkerPoolProtocol, path: Path, exc: OSError) -> None:
        self._log.warning('⚠  cannot read %s: %s', path, exc.strerror or exc)
        pool.report_error(TraversalError(path, exc))
