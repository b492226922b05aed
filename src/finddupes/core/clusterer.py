"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/clusterer.py
Splits same-size candidate groups into groups of byte-identical files.

Candidates are compared directly against each other instead of being hashed.
Each input group can be in one of these shapes, all handled the same way:
  • empty, or all files different → nothing is yielded
  • all files the same → one group
  • several sets of equal files, possibly mixed with unique ones → one group per set
"""

from typing import Iterable, Iterator, List, Optional, Callable
import logging

from finddupes.core.models import FileRecord, SizeGroup, ContentGroup, Stage
from finddupes.core.comparator import FileComparatorImpl
from finddupes.core.interfaces import ContentComparator

logger = logging.getLogger(__name__)


class ContentClusterer:
    """
    Lazily turns candidate SizeGroups into ContentGroups.

    A candidate group is only pulled from upstream once every confirmed group of
    the previous one has been handed out.
    """

    def __init__(
        self,
        groups: Iterable[SizeGroup],
        comparator: Optional[ContentComparator] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ):
        self.comparator = comparator or FileComparatorImpl()
        self.progress_callback = progress_callback
        self.groups_processed = 0
        self._input = iter(groups)
        self._output_queue: List[ContentGroup] = []

    def __iter__(self) -> "ContentClusterer":
        return self

    def __next__(self) -> ContentGroup:
        while True:
            if self._output_queue:
                return self._output_queue.pop()

            # Raises StopIteration once upstream is exhausted
            candidate_group = next(self._input)
            self._output_queue.extend(self.regroup(candidate_group))

            self.groups_processed += 1
            if self.progress_callback:
                self.progress_callback(Stage.CONTENT.value, self.groups_processed, None)

    def regroup(self, group: SizeGroup) -> List[ContentGroup]:
        """
        Partition one same-size group by content.

        Think of sorting a stack of coloured plates: take the top plate, put it on
        the first pile of the same colour, or start a new pile if there is none.
        Only a pile's first plate is looked at, since equality is transitive.
        """
        candidates = list(group.records)
        clusters: List[List[FileRecord]] = []

        while candidates:
            candidate = candidates.pop()
            for cluster in clusters:
                if self.comparator.compare(candidate.path, cluster[0].path):
                    cluster.append(candidate)
                    break
            else:
                clusters.append([candidate])

        confirmed = [
            ContentGroup(size=group.size, records=cluster)
            for cluster in clusters
            if len(cluster) >= 2
        ]
        logger.debug(
            f"Size {group.size}: {len(group.records)} candidates → {len(confirmed)} duplicate groups"
        )
        return confirmed
