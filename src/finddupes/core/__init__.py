"""
Core duplicate search engine — walker, grouper, comparator, clusterer, and pipeline orchestrator.

This package contains the performance-critical foundation of finddupes:
- DirectoryWalker: lazy breadth-first traversal with a device/inode cycle guard
- InodeConsolidator: merges hard links into one record per physical file
- SizeBucketer: exact-size grouping with singleton filtering
- PrefixHashPrefilter + XXHashAlgorithmImpl: optional xxHash64 quick reject
- FileComparatorImpl: streaming chunk-by-chunk content comparison
- ContentClusterer: lazy partitioning of size groups into identical-content groups
- DuplicateFinderImpl: the pipeline (walk → inode → size → content)
- Models: FileRecord, SizeGroup, ContentGroup, ScanParams and statistics

All components are pure Python with no UI dependencies.
"""

from .scanner import DirectoryWalker
from .grouper import InodeConsolidator, SizeBucketer
from .hasher import PrefixHashPrefilter, XXHashAlgorithmImpl
from .comparator import FileComparatorImpl, ContentComparisonError
from .clusterer import ContentClusterer
from .pipeline import DuplicateFinderImpl
from .models import (
    FileRecord, SizeGroup, ContentGroup, ScanParams, PipelineStats,
    OutputFormat, Stage, ComparisonConfig)

__all__ = [
    "DirectoryWalker",
    "InodeConsolidator",
    "SizeBucketer",
    "PrefixHashPrefilter",
    "XXHashAlgorithmImpl",
    "FileComparatorImpl",
    "ContentComparisonError",
    "ContentClusterer",
    "DuplicateFinderImpl",
    "FileRecord",
    "SizeGroup",
    "ContentGroup",
    "ScanParams",
    "PipelineStats",
    "OutputFormat",
    "Stage",
    "ComparisonConfig",
]
