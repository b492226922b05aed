"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements lazy, breadth-first directory traversal.
Features:
- Yields one FileRecord per regular file, on demand (no up-front directory listing)
- Never follows symbolic links; special files are ignored
- Guards against directory cycles (bind mounts) by device + inode identity
- Unreadable directories and vanished entries are skipped, never fatal
"""

import os
import stat
from collections import deque
from pathlib import Path
from typing import Deque, List, Set, Tuple, Optional, Callable
import logging

logger = logging.getLogger(__name__)

# Local imports
from finddupes.core.models import FileRecord, ComparisonConfig, Stage
from finddupes.core.interfaces import FileWalker


class DirectoryWalker(FileWalker):
    """
    Iterates over every regular file reachable from a root directory.

    Two work queues drive the traversal: directories waiting to be listed and files
    waiting to be emitted. Queued files are always emitted before another directory
    is expanded, which gives breadth-first order.

    Attributes:
        root_dir: Directory to walk (resolved to an absolute path when possible)
        min_size: Files smaller than this many bytes are not emitted
        files_emitted: Number of records produced so far
        dirs_expanded: Number of directories listed so far
    """

    def __init__(
        self,
        root_dir: str,
        min_size: int = 0,
        progress_callback: Optional[Callable[[str, int, object], None]] = None,
        progress_interval: int = ComparisonConfig.PROGRESS_INTERVAL
    ):
        try:
            self.root_dir = str(Path(root_dir).resolve(strict=True))
        except (OSError, RuntimeError):
            self.root_dir = str(root_dir)
        self.min_size = min_size
        self.progress_callback = progress_callback
        self.progress_interval = progress_interval

        self.files_emitted = 0
        self.dirs_expanded = 0
        self._file_queue: List[FileRecord] = []
        self._dir_queue: Deque[str] = deque([self.root_dir])
        self._seen_dirs: Set[Tuple[int, int]] = set()
        self._finished = False

        logger.debug(f"Walking {self.root_dir} (min_size={self.min_size})")

    def __iter__(self) -> "DirectoryWalker":
        return self

    def __next__(self) -> FileRecord:
        while self._file_queue or self._dir_queue:
            # Files from previous directory reads go out first
            if self._file_queue:
                record = self._file_queue.pop()
                self.files_emitted += 1
                self._report_progress(periodic=True)
                return record

            self._expand(self._dir_queue.popleft())

        if not self._finished:
            self._finished = True
            self._report_progress(periodic=False)
            logger.debug(
                f"Walk finished: {self.files_emitted} files in {self.dirs_expanded} directories"
            )
        raise StopIteration

    def _expand(self, dir_path: str) -> None:
        """List one directory and queue its wanted children."""
        try:
            dir_stat = os.stat(dir_path)
        except OSError as e:
            logger.debug(f"Could not stat directory {dir_path}: {e}")
            return

        identity = (dir_stat.st_dev, dir_stat.st_ino)
        if identity in self._seen_dirs:
            logger.debug(f"Skipping already visited directory: {dir_path}")
            return
        self._seen_dirs.add(identity)
        self.dirs_expanded += 1

        for entry in self._read_dir_optimistically(dir_path):
            try:
                entry_stat = entry.stat(follow_symlinks=False)
            except OSError as e:
                logger.debug(f"Could not stat {entry.path}: {e}")
                continue
            self._push_child(entry.path, entry_stat)

    @staticmethod
    def _read_dir_optimistically(dir_path: str) -> List[os.DirEntry]:
        """Read a directory's children, returning nothing on failure."""
        try:
            with os.scandir(dir_path) as it:
                return list(it)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {dir_path}: {e}")
            return []

    def _push_child(self, path: str, st: os.stat_result) -> None:
        """Queue a child entry if it is a wanted directory or a wanted file."""
        if self._is_wanted_dir(st):
            self._dir_queue.append(path)
        elif self._is_wanted_file(st):
            self._file_queue.append(FileRecord(
                paths=[path],
                size=st.st_size,
                device=st.st_dev,
                inode=st.st_ino,
                nlink=st.st_nlink,
            ))
        else:
            logger.debug(f"Skipping {path} (not a regular file or below size threshold)")

    def _is_wanted_dir(self, st: os.stat_result) -> bool:
        return stat.S_ISDIR(st.st_mode) and (st.st_dev, st.st_ino) not in self._seen_dirs

    def _is_wanted_file(self, st: os.stat_result) -> bool:
        return stat.S_ISREG(st.st_mode) and st.st_size >= self.min_size

    def _report_progress(self, periodic: bool) -> None:
        if not self.progress_callback:
            return
        if periodic and self.files_emitted % self.progress_interval:
            return
        self.progress_callback(Stage.WALK.value, self.files_emitted, None)
