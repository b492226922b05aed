"""
Shared fixtures for duplicate search tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Callable, Dict
import sys

# Add src/ to sys.path so 'finddupes' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from finddupes.core.models import FileRecord


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_file(temp_dir) -> Callable[..., Path]:
    """Returns a helper writing bytes to a path relative to temp_dir (parents created)."""
    def _write(relative: str, content: bytes) -> Path:
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path
    return _write


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 2 identical 1KB files, plus a third copy in a subdirectory
    - 2 identical 2KB files
    - 1 unique 1KB file (same size as the first set, different content)
    - 1 unique 2.5KB file (no size peer)
    - 1 empty file
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate pair #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Unique files
    files["same_size_unique"] = temp_dir / "same_size_unique.txt"
    files["same_size_unique"].write_bytes(b"A" * 1023 + b"Z")
    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"D" * 2500)

    files["empty"] = temp_dir / "empty.txt"
    files["empty"].write_bytes(b"")

    # Subdirectory with another copy of set #1
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


def make_record(path: str, size: int = 100, inode: int = 1, device: int = 1, nlink: int = 1) -> FileRecord:
    """Builds an in-memory FileRecord for tests that never touch the disk."""
    return FileRecord(paths=[path], size=size, device=device, inode=inode, nlink=nlink)
