"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file discovery and duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Union, Optional
from enum import Enum

from finddupes.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class OutputFormat(Enum):
    """Serialization format for the final duplicate report."""
    JSON = "json"
    HTML = "html"

    def __repr__(self) -> str:
        return self.value


class Stage(str, Enum):
    WALK = "Directory walk"
    CONTENT = "Content comparison"


# ======================
#  Core Data Models
# ======================

@dataclass
class FileRecord:
    """
    One physical file on disk (a unique device + inode pair), not one path.
    Every hard link discovered for the file is kept in `paths`, in discovery order.
    """
    paths: List[str]
    size: int  # in bytes
    device: int
    inode: int
    nlink: int = 1

    def __post_init__(self):
        if not self.paths:
            raise ValueError("FileRecord requires at least one path")

    @property
    def identity(self) -> Tuple[int, int]:
        """Composite (device, inode) key of the physical file."""
        return self.device, self.inode

    @property
    def path(self) -> str:
        """Representative path used to read the file content."""
        return self.paths[0]

    def merge(self, other: "FileRecord") -> None:
        """
        Absorb another observation of the same physical file.
        Paths are appended, size and link count take the newer values.
        """
        if other.identity != self.identity:
            raise ValueError(f"Cannot merge {other!r} into {self!r}: different inode")
        self.paths.extend(other.paths)
        self.size = other.size
        self.nlink = other.nlink

    def to_dict(self) -> Dict[str, Union[int, List[str]]]:
        return {
            "paths": list(self.paths),
            "size": self.size,
            "device": self.device,
            "inode": self.inode,
            "nlink": self.nlink,
        }

    def __repr__(self):
        return f"<FileRecord paths={self.paths}, size={self.size}, inode={self.identity}>"


@dataclass
class SizeGroup:
    """
    Candidate records that share one exact byte size.
    Only groups with two or more records are worth comparing.
    """
    size: int
    records: List[FileRecord] = field(default_factory=list)

    def add_record(self, record: FileRecord) -> None:
        if record.size != self.size:
            raise ValueError("Cannot add record with different size to a group.")
        self.records.append(record)

    def is_candidate(self) -> bool:
        """True if this group contains at least two records."""
        return len(self.records) >= 2

    def __repr__(self):
        return f"<SizeGroup size={self.size}, count={len(self.records)}>"


@dataclass
class ContentGroup:
    """
    Records confirmed byte-identical by direct content comparison.
    """
    size: int
    records: List[FileRecord]

    @property
    def duplicate_count(self) -> int:
        """How many physical files are in this group."""
        return len(self.records)

    @property
    def paths(self) -> List[str]:
        return [path for record in self.records for path in record.paths]

    @property
    def reclaimable_bytes(self) -> int:
        """Bytes freed if all but one physical file were removed."""
        return self.size * (self.duplicate_count - 1)

    def to_list(self) -> List[Dict[str, Union[int, List[str]]]]:
        return [record.to_dict() for record in self.records]

    def __repr__(self):
        return f"<ContentGroup size={self.size}, count={len(self.records)}>"


class PipelineStats:
    """
    Statistics collected while the pipeline runs.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.files_scanned: int = 0
        self.dirs_expanded: int = 0
        self.unique_records: int = 0
        self.hard_linked_records: int = 0
        self.candidate_groups: int = 0
        self.comparisons: int = 0
        self.content_groups: int = 0
        self.duplicate_files: int = 0
        self.reclaimable_bytes: int = 0
        self.stage_times: Dict[str, float] = {}

    def record_stage(self, stage_name: str, duration: float) -> None:
        self.stage_times[stage_name] = self.stage_times.get(stage_name, 0.0) + duration

    def record_group(self, group: ContentGroup) -> None:
        self.content_groups += 1
        self.duplicate_files += group.duplicate_count
        self.reclaimable_bytes += group.reclaimable_bytes

    def print_summary(self) -> str:
        lines = [
            "📊 Duplicate Search Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"Files scanned: {self.files_scanned} (in {self.dirs_expanded} directories)",
            f"Unique files on disk: {self.unique_records} ({self.hard_linked_records} with several links)",
            f"Same-size candidate groups: {self.candidate_groups}",
            f"Content comparisons: {self.comparisons}",
            f"Duplicate groups: {self.content_groups} ({self.duplicate_files} files)",
            f"Reclaimable space: {self.reclaimable_bytes} bytes",
        ]
        for stage, duration in self.stage_times.items():
            lines.append(f"{stage}: {duration:.3f}s")
        return "\n".join(lines)


# =============================
# Configuration
# =============================

class ComparisonConfig:
    CHUNK_SIZE = 1024 * 1024  # bytes read per file per comparison step
    PREFIX_SIZE = 4 * 1024  # bytes hashed per file by the quick-reject prefilter
    DEFAULT_MIN_SIZE = "100000"
    PROGRESS_INTERVAL = 5000  # walker reports progress every N files


"""
DTO for scan parameters with built-in validation.
Interface-agnostic — used by the CLI and by library callers.
"""

@dataclass
class ScanParams:
    """Parameters for a duplicate search with validation."""
    root_dir: str
    min_size_bytes: int = int(ComparisonConfig.DEFAULT_MIN_SIZE)
    output_format: OutputFormat = OutputFormat.JSON
    chunk_size: int = ComparisonConfig.CHUNK_SIZE
    quick_reject: bool = False
    prefix_size: int = ComparisonConfig.PREFIX_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if self.prefix_size <= 0:
            raise ValueError("Prefix size must be positive")

    @staticmethod
    def from_human_readable(
            root_dir: str,
            min_size_str: str = ComparisonConfig.DEFAULT_MIN_SIZE,
            output_format: str = "json",
            chunk_size_str: Optional[str] = None,
            quick_reject: bool = False,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Useful for CLI argument parsing.
        """
        min_size = ConvertUtils.human_to_bytes(min_size_str)
        chunk_size = (ConvertUtils.human_to_bytes(chunk_size_str)
                      if chunk_size_str else ComparisonConfig.CHUNK_SIZE)

        return ScanParams(
            root_dir=root_dir,
            min_size_bytes=min_size,
            output_format=OutputFormat(output_format.lower()),
            chunk_size=chunk_size,
            quick_reject=quick_reject,
        )
