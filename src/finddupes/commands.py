"""
Unified command orchestrator for the duplicate search.
This is the SINGLE source of truth for business logic used by the CLI and library callers.
"""
from typing import List, Optional, Callable, Tuple
from pathlib import Path

from finddupes.core.models import ContentGroup, PipelineStats, ScanParams
from finddupes.core.pipeline import DuplicateFinderImpl


class FindDuplicatesCommand:
    """
    Orchestrates the whole duplicate search:
    1. Check the root directory
    2. Run walk → inode consolidation → size grouping → content clustering
    3. Return the groups with the statistics collected on the way

    Usage:
        params = ScanParams.from_human_readable("/data", "10k")
        command = FindDuplicatesCommand()
        groups, stats = command.execute(params, progress_callback=cli_progress_printer)
    """

    def __init__(self, finder: Optional[DuplicateFinderImpl] = None):
        self._finder = finder or DuplicateFinderImpl()

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[List[ContentGroup], PipelineStats]:
        """
        Execute the duplicate search with given parameters.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            RuntimeError: If the root is not a directory
            ContentComparisonError: If a candidate file cannot be read during comparison
        """
        root_path = Path(params.root_dir)
        if not root_path.is_dir():
            raise RuntimeError(f"Not a directory: {params.root_dir}")

        return self._finder.find_duplicates(
            params,
            progress_callback=progress_callback
        )
