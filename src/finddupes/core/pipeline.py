"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

pipeline.py
Implements the pull-based duplicate search pipeline:
    walk → inode consolidation → size grouping → [prefix prefilter] → content clustering

The walk and the consolidation run to completion first (hard links must be merged
before sizes are compared). Everything after that is lazy: a content group is
produced as soon as its size group has been clustered.
"""
import time
from typing import Iterable, Iterator, List, Tuple, Optional, Callable
import logging

from finddupes.core.models import ContentGroup, SizeGroup, PipelineStats, ScanParams, Stage
from finddupes.core.scanner import DirectoryWalker
from finddupes.core.grouper import InodeConsolidator, SizeBucketer
from finddupes.core.hasher import PrefixHashPrefilter
from finddupes.core.comparator import FileComparatorImpl
from finddupes.core.clusterer import ContentClusterer
from finddupes.core.interfaces import DuplicateFinder, ContentComparator

logger = logging.getLogger(__name__)


# =============================
# Main Pipeline Class
# =============================
class DuplicateFinderImpl(DuplicateFinder):
    """
    Wires the pipeline stages together and collects statistics.
    A custom comparator can be injected (used by tests to observe comparisons).
    """
    def __init__(self, comparator: Optional[ContentComparator] = None):
        self.comparator = comparator

    def iter_duplicates(
        self,
        params: ScanParams,
        stats: Optional[PipelineStats] = None,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Iterator[ContentGroup]:
        """
        Lazily yield confirmed duplicate groups for params.root_dir.
        Args:
            params: Validated scan parameters
            stats: Optional statistics object filled in while iterating
            progress_callback: Reports progress as (stage, current, total)
        """
        stats = stats if stats is not None else PipelineStats()
        comparator = self.comparator or FileComparatorImpl(params.chunk_size)

        # Stage 1: walk and merge hard links (must finish before grouping by size)
        start_time = time.time()
        walker = DirectoryWalker(params.root_dir, params.min_size_bytes, progress_callback)
        consolidator = InodeConsolidator()
        records = consolidator.consolidate(walker)
        stats.record_stage(Stage.WALK.value, time.time() - start_time)

        stats.files_scanned = walker.files_emitted
        stats.dirs_expanded = walker.dirs_expanded
        stats.unique_records = len(records)
        stats.hard_linked_records = consolidator.hard_linked_records

        # Stage 2: size groups, optionally narrowed by prefix digest
        groups: Iterable[SizeGroup] = self._count_candidates(SizeBucketer().process(records), stats)
        if params.quick_reject:
            groups = PrefixHashPrefilter(prefix_size=params.prefix_size).process(groups)

        # Stage 3: content clustering
        start_time = time.time()
        try:
            for group in ContentClusterer(groups, comparator, progress_callback):
                stats.record_group(group)
                yield group
        finally:
            stats.comparisons = getattr(comparator, "comparisons", 0)
            stats.record_stage(Stage.CONTENT.value, time.time() - start_time)

    def find_duplicates(
        self,
        params: ScanParams,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[ContentGroup], PipelineStats]:
        """
        Run the whole pipeline and collect every duplicate group.
        Returns:
            Tuple[List[ContentGroup], PipelineStats]
        """
        stats = PipelineStats()
        total_start_time = time.time()

        groups = list(self.iter_duplicates(params, stats, progress_callback))

        # Sort by descending size
        groups.sort(key=lambda g: -g.size)

        stats.total_time = time.time() - total_start_time
        logger.info(
            f"Found {stats.content_groups} duplicate groups "
            f"({stats.duplicate_files} files) in {stats.total_time:.2f}s"
        )
        return groups, stats

    @staticmethod
    def _count_candidates(groups: Iterable[SizeGroup], stats: PipelineStats) -> Iterator[SizeGroup]:
        for group in groups:
            stats.candidate_groups += 1
            yield group
