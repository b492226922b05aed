"""
Unit tests for FileComparatorImpl.
Verifies streaming comparison, including differences hidden in the last partial chunk.
"""
import pytest
from finddupes.core.comparator import FileComparatorImpl, ContentComparisonError


class TestFileComparatorImpl:
    """Test byte-for-byte comparison with small chunks to exercise boundaries."""

    def test_identical_files_are_equal(self, write_file):
        a = write_file("a.bin", b"0123456789" * 50)
        b = write_file("b.bin", b"0123456789" * 50)
        assert FileComparatorImpl(chunk_size=64).compare(str(a), str(b)) is True

    def test_difference_in_first_byte(self, write_file):
        a = write_file("a.bin", b"X" + b"0" * 499)
        b = write_file("b.bin", b"Y" + b"0" * 499)
        assert FileComparatorImpl(chunk_size=64).compare(str(a), str(b)) is False

    def test_difference_only_in_final_partial_chunk(self, write_file):
        a = write_file("a.bin", b"0" * 499 + b"X")
        b = write_file("b.bin", b"0" * 499 + b"Y")
        assert FileComparatorImpl(chunk_size=64).compare(str(a), str(b)) is False

    @pytest.mark.parametrize("size", [64, 128, 640])
    def test_sizes_on_chunk_boundary(self, write_file, size):
        a = write_file("a.bin", b"z" * size)
        b = write_file("b.bin", b"z" * size)
        c = write_file("c.bin", b"z" * (size - 1) + b"!")
        comparator = FileComparatorImpl(chunk_size=64)
        assert comparator.compare(str(a), str(b)) is True
        assert comparator.compare(str(a), str(c)) is False

    def test_prefix_of_longer_file_is_not_equal(self, write_file):
        """A file truncated after its size was recorded must not match."""
        a = write_file("a.bin", b"q" * 100)
        b = write_file("b.bin", b"q" * 90)
        assert FileComparatorImpl(chunk_size=64).compare(str(a), str(b)) is False
        assert FileComparatorImpl(chunk_size=64).compare(str(b), str(a)) is False

    def test_empty_files_are_equal(self, write_file):
        a = write_file("a.bin", b"")
        b = write_file("b.bin", b"")
        assert FileComparatorImpl().compare(str(a), str(b)) is True

    def test_counts_comparisons(self, write_file):
        a = write_file("a.bin", b"1")
        b = write_file("b.bin", b"2")
        comparator = FileComparatorImpl()
        comparator.compare(str(a), str(b))
        comparator.compare(str(a), str(a))
        assert comparator.comparisons == 2

    def test_missing_file_raises(self, write_file, temp_dir):
        a = write_file("a.bin", b"data")
        missing = temp_dir / "vanished.bin"

        with pytest.raises(ContentComparisonError) as exc_info:
            FileComparatorImpl().compare(str(a), str(missing))

        assert exc_info.value.path == str(missing)
        assert "vanished.bin" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_missing_first_file_raises(self, write_file, temp_dir):
        b = write_file("b.bin", b"data")
        with pytest.raises(ContentComparisonError) as exc_info:
            FileComparatorImpl().compare(str(temp_dir / "gone.bin"), str(b))
        assert exc_info.value.path.endswith("gone.bin")

    def test_rejects_non_positive_chunk_size(self):
        with pytest.raises(ValueError):
            FileComparatorImpl(chunk_size=0)
