#!/usr/bin/env python3
"""
finddupes CLI — Command line interface for duplicate file detection.
Walks a directory, compares same-size files byte by byte and prints the duplicate
groups as JSON (default) or HTML. Nothing is ever modified on disk.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from finddupes.core.models import ScanParams, ContentGroup, OutputFormat, ComparisonConfig
from finddupes.core.comparator import ContentComparisonError
from finddupes.commands import FindDuplicatesCommand
from finddupes.utils.convert_utils import ConvertUtils
from finddupes.services.report_service import ReportService

EPILOG_TEXT = """
Size units (case-insensitive):
  k, m, g, t     (or kb, mb, ...)   powers of 1000
  ki, mi, gi, ti (or kib, mib, ...) powers of 1024

Examples:
  Find duplicates of at least 100000 bytes in Downloads, print JSON
  %(prog)s ~/Downloads

  Include smaller files and write an HTML report
  %(prog)s ~/Downloads --min-size 10kib --format html -o report.html

  Skip obviously different files early by hashing their first bytes
  %(prog)s /srv/media --quick-reject --verbose
"""

EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="finddupes",
            description="finddupes — Identify duplicate files",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "path",
            metavar="PATH",
            type=str,
            help="Location to search"
        )

        # Filtering options
        parser.add_argument(
            "--min-size", "-m",
            default=ComparisonConfig.DEFAULT_MIN_SIZE,
            type=str,
            metavar='SIZE',
            help=f"Ignore files smaller than this (e.g. 500k, 1MiB). "
                 f"Default: {ComparisonConfig.DEFAULT_MIN_SIZE}"
        )

        # Comparison options
        parser.add_argument(
            "--chunk-size",
            default=None,
            type=str,
            metavar='SIZE',
            help="Bytes read per file per comparison step. Default: 1MiB"
        )
        parser.add_argument(
            "--quick-reject",
            action="store_true",
            help="Hash the first 4KiB of same-size files to skip obviously different ones"
        )

        # Output options
        parser.add_argument(
            "--format", "-f",
            choices=[fmt.value for fmt in OutputFormat],
            default=OutputFormat.JSON.value,
            type=str,
            dest="output_format",
            help="Report format. Default: json"
        )
        parser.add_argument(
            "--output", "-o",
            default=None,
            type=str,
            metavar='FILE',
            help="Write the report to FILE instead of standard output"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show detailed statistics and progress"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before any traversal."""
        if args.verbose and args.quiet:
            self.error_exit("--verbose and --quiet cannot be used together", EXIT_USAGE)

        root_path = Path(args.path).resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.path}", EXIT_USAGE)
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.path}", EXIT_USAGE)

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments, parsing every size spec once."""
        try:
            return ScanParams.from_human_readable(
                root_dir=str(Path(args.path).resolve()),
                min_size_str=args.min_size,
                output_format=args.output_format,
                chunk_size_str=args.chunk_size,
                quick_reject=args.quick_reject,
            )
        except ValueError as e:
            self.error_exit(str(e), EXIT_USAGE)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} processed...")
        sys.stderr.flush()

    def run_search(self, params: ScanParams) -> List[ContentGroup]:
        """Execute the duplicate search workflow."""
        command = FindDuplicatesCommand()
        if self.verbose:
            print(f"Scanning directory: {params.root_dir}", file=sys.stderr)

        try:
            groups, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except ContentComparisonError as e:
            self.error_exit(f"Comparison failed: {e}")
        except (OSError, RuntimeError) as e:
            self.error_exit(f"Duplicate search failed: {e}")

        if self.verbose:
            sys.stderr.write("\n")
            print(stats.print_summary(), file=sys.stderr)
            print(f"Reclaimable: {ConvertUtils.bytes_to_human(stats.reclaimable_bytes)}", file=sys.stderr)

        return groups

    def output_results(self, groups: List[ContentGroup], params: ScanParams, output: Optional[str]) -> None:
        """Write the report to the requested destination."""
        if output is None:
            ReportService.write(sys.stdout, groups, params.output_format)
            sys.stdout.flush()
            return

        report = ReportService.render(groups, params.output_format)
        try:
            with open(output, "w", encoding="utf-8") as dest:
                dest.write(report + "\n")
        except OSError as e:
            self.error_exit(f"Cannot write report to {output}: {e}")

        if not self.quiet:
            print(f"Report written to {output} ({len(groups)} duplicate groups)", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = EXIT_FAILURE) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, args=None) -> None:
        """Main entry point."""
        args = self.parse_args(args)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("finddupes").setLevel(logging.INFO)

        self.validate_args(args)
        params = self.create_params(args)

        groups = self.run_search(params)
        self.output_results(groups, params, args.output)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
