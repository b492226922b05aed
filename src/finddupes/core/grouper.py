"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Groups file records by physical identity (hard links) and by exact size.
"""

from typing import Dict, Iterable, Iterator, List, Tuple
import logging

from finddupes.core.models import FileRecord, SizeGroup

logger = logging.getLogger(__name__)


class InodeConsolidator:
    """
    Collapses every hard link of a physical file into a single FileRecord.

    Must consume the whole walk before size grouping starts: otherwise the same
    file, reached through two links, could sit twice in one size group and be
    reported as a duplicate of itself.
    """

    def __init__(self):
        self.hard_linked_records = 0

    def consolidate(self, records: Iterable[FileRecord]) -> List[FileRecord]:
        """
        Merge records sharing a (device, inode) pair.
        Returns one record per identity, in order of first discovery.
        """
        by_inode: Dict[Tuple[int, int], FileRecord] = {}
        for record in records:
            existing = by_inode.get(record.identity)
            if existing is None:
                by_inode[record.identity] = record
            else:
                # Single observer: the newest observation wins for size and nlink
                existing.merge(record)

        consolidated = list(by_inode.values())
        self.hard_linked_records = sum(1 for r in consolidated if len(r.paths) > 1)
        logger.debug(
            f"Consolidated into {len(consolidated)} records "
            f"({self.hard_linked_records} reached through several paths)"
        )
        return consolidated


class SizeBucketer:
    """Partitions records into groups of exactly equal size."""

    @staticmethod
    def group_by_size(records: Iterable[FileRecord]) -> Dict[int, SizeGroup]:
        """Groups records by their size, keeping singleton groups."""
        groups: Dict[int, SizeGroup] = {}
        for record in records:
            if record.size not in groups:
                groups[record.size] = SizeGroup(size=record.size)
            groups[record.size].add_record(record)
        return groups

    def process(self, records: Iterable[FileRecord]) -> Iterator[SizeGroup]:
        """
        Yield a SizeGroup for every size shared by 2+ records.
        A record without a size peer cannot have a duplicate.
        """
        for group in self.group_by_size(records).values():
            if group.is_candidate():
                yield group
