"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

comparator.py
Streaming byte-for-byte comparison of two files.

Both files are read in lockstep, one fixed-size chunk at a time, so memory stays at
two chunk buffers whatever the file size, and reading stops at the first chunk
that differs.
"""

import logging

from finddupes.core.models import ComparisonConfig
from finddupes.core.interfaces import ContentComparator

logger = logging.getLogger(__name__)


class ContentComparisonError(RuntimeError):
    """A file selected for comparison could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to read {path}: {reason}")


class FileComparatorImpl(ContentComparator):
    """
    Compares files chunk by chunk.
    Keeps a count of comparisons for statistics.
    """

    def __init__(self, chunk_size: int = ComparisonConfig.CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size = chunk_size
        self.comparisons = 0

    def compare(self, path1: str, path2: str) -> bool:
        """Return True if both files hold exactly the same bytes."""
        self.comparisons += 1
        current = path1
        try:
            with open(path1, 'rb') as f1:
                current = path2
                with open(path2, 'rb') as f2:
                    while True:
                        current = path1
                        chunk1 = f1.read(self.chunk_size)
                        current = path2
                        chunk2 = f2.read(self.chunk_size)

                        if chunk1 != chunk2:
                            logger.debug(f"Content differs: {path1} <> {path2}")
                            return False

                        # Short or empty chunk on both sides: end of both files
                        if len(chunk1) < self.chunk_size:
                            return True
        except OSError as e:
            raise ContentComparisonError(current, e.strerror or str(e)) from e
