"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Optional quick-reject prefilter for same-size candidate groups.

Hashes only the first few KiB of each candidate with a pluggable algorithm and splits
the group by digest. Files with different prefixes can never be equal, so the split
only saves comparisons; the final verdict always comes from the byte comparison.
"""

from typing import Dict, Iterable, Iterator, Optional
import logging

import xxhash

from finddupes.core.models import FileRecord, SizeGroup, ComparisonConfig
from finddupes.core.interfaces import CandidateStage, HashAlgorithm
from finddupes.core.comparator import ContentComparisonError

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh64(data).digest()


class PrefixHashPrefilter(CandidateStage):
    """
    Splits each candidate group by the digest of its members' leading bytes.
    """

    def __init__(
        self,
        algorithm: Optional[HashAlgorithm] = None,
        prefix_size: int = ComparisonConfig.PREFIX_SIZE
    ):
        if prefix_size <= 0:
            raise ValueError("Prefix size must be positive")
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.prefix_size = prefix_size
        self.rejected = 0

    def compute_prefix_hash(self, record: FileRecord) -> bytes:
        """Hash of the first `prefix_size` bytes of the record's file."""
        return self.algorithm.hash(self._read_prefix(record.path))

    def process(self, groups: Iterable[SizeGroup]) -> Iterator[SizeGroup]:
        for group in groups:
            # Files no longer than the prefix go straight to the comparator
            if group.size <= self.prefix_size:
                yield group
                continue

            by_digest: Dict[bytes, SizeGroup] = {}
            for record in group.records:
                digest = self.compute_prefix_hash(record)
                if digest not in by_digest:
                    by_digest[digest] = SizeGroup(size=group.size)
                by_digest[digest].add_record(record)

            for subgroup in by_digest.values():
                if subgroup.is_candidate():
                    yield subgroup
                else:
                    self.rejected += 1

    def _read_prefix(self, path: str) -> bytes:
        try:
            with open(path, 'rb') as f:
                return f.read(self.prefix_size)
        except OSError as e:
            raise ContentComparisonError(path, e.strerror or str(e)) from e
