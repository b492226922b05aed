"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate search pipeline.
These protocols use Python's `typing.Protocol` for structural typing, so stages can be
swapped (e.g. a fake comparator in tests) without inheriting from anything.

Key Components:
---------------
- FileWalker: Lazy producer of FileRecords for every regular file under a root.
- ContentComparator: Decides whether two files hold exactly the same bytes.
- HashAlgorithm: Digest function used by the optional quick-reject prefilter.
- CandidateStage: Any stage turning a stream of SizeGroups into a stream of SizeGroups.
- DuplicateFinder: The engine coordinating all stages.
"""

from typing import Protocol, Iterator, Iterable, List, Tuple, Optional, Callable
from finddupes.core.models import FileRecord, SizeGroup, ContentGroup, ScanParams, PipelineStats


# ===== Interfaces =====

class FileWalker(Protocol):
    """
    Interface for lazy filesystem traversal.

    Iterating yields one FileRecord per discovered path; hard links are not merged here.
    """
    def __iter__(self) -> Iterator[FileRecord]:
        ...

    def __next__(self) -> FileRecord:
        ...


class ContentComparator(Protocol):
    """Interface for byte-for-byte comparison of two files."""

    def compare(self, path1: str, path2: str) -> bool:
        """
        Return True only if both files hold identical bytes.

        Raises:
            ContentComparisonError: If either file cannot be read.
        """
        ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256 or xxHash
    for the prefilter without affecting the rest of the pipeline.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the hash of the provided byte data."""
        ...


# =============================
# Stage Interfaces
# =============================

class CandidateStage(Protocol):
    """
    Interface for a stage that refines candidate groups before content comparison.
    """
    def process(self, groups: Iterable[SizeGroup]) -> Iterator[SizeGroup]:
        """
        Lazily split incoming groups, yielding only groups of 2+ records.
        """
        ...


class DuplicateFinder(Protocol):
    """
    Interface for the main duplicate search engine.

    Coordinates walk → inode consolidation → size grouping → content clustering.
    """
    def iter_duplicates(
        self,
        params: ScanParams,
        stats: Optional[PipelineStats] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Iterator[ContentGroup]:
        """
        Lazily yield confirmed duplicate groups, filling `stats` on the way.
        """
        ...

    def find_duplicates(
        self,
        params: ScanParams,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[ContentGroup], PipelineStats]:
        """
        Run the full pipeline.

        Args:
            params: Root directory, size threshold and comparison settings.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            A tuple of confirmed duplicate groups and the statistics collected.
        """
        ...
