"""
finddupes — duplicate file finder based on direct content comparison.

Core features:
- Lazy breadth-first directory walk that never follows symbolic links
- Hard links are merged, so one physical file is never reported as its own duplicate
- Size grouping, then chunk-by-chunk byte comparison (no full-file hashing)
- Optional xxHash64 quick reject on file prefixes (--quick-reject)
- JSON or HTML report, CLI interface for headless/server usage
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("finddupes")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli
    from pathlib import Path as _Path

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from finddupes.commands import FindDuplicatesCommand
from finddupes.core import (
    ScanParams, OutputFormat, FileRecord, ContentGroup, PipelineStats, ContentComparisonError)
from finddupes.utils.convert_utils import ConvertUtils
from finddupes.services import ReportService

__all__ = [
    "FindDuplicatesCommand",
    "ScanParams",
    "OutputFormat",
    "FileRecord",
    "ContentGroup",
    "PipelineStats",
    "ContentComparisonError",
    "ConvertUtils",
    "ReportService",
    "__version__",
]
