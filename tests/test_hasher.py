"""
Unit tests for the quick-reject prefix prefilter.
"""
import pytest
import xxhash
from finddupes.core.hasher import PrefixHashPrefilter, XXHashAlgorithmImpl
from finddupes.core.comparator import ContentComparisonError
from finddupes.core.models import SizeGroup
from conftest import make_record


def group_of(paths, size):
    return SizeGroup(size=size, records=[make_record(str(p), size=size, inode=i) for i, p in enumerate(paths)])


class TestXXHashAlgorithmImpl:
    def test_matches_xxh64_digest(self):
        assert XXHashAlgorithmImpl.hash(b"abc") == xxhash.xxh64(b"abc").digest()
        assert len(XXHashAlgorithmImpl.hash(b"")) == 8


class TestPrefixHashPrefilter:
    """Test splitting of candidate groups by prefix digest."""

    def test_splits_by_prefix_and_drops_singletons(self, write_file):
        size = 100
        a1 = write_file("a1.bin", b"A" * size)
        a2 = write_file("a2.bin", b"A" * size)
        b1 = write_file("b1.bin", b"B" * size)

        prefilter = PrefixHashPrefilter(prefix_size=16)
        groups = list(prefilter.process([group_of([a1, a2, b1], size)]))

        assert len(groups) == 1
        assert sorted(r.path for r in groups[0].records) == sorted([str(a1), str(a2)])
        assert prefilter.rejected == 1

    def test_same_prefix_different_tail_stays_together(self, write_file):
        """Prefix equality is not content equality: comparison still decides."""
        a = write_file("a.bin", b"P" * 50 + b"x" * 50)
        b = write_file("b.bin", b"P" * 50 + b"y" * 50)

        groups = list(PrefixHashPrefilter(prefix_size=16).process([group_of([a, b], 100)]))
        assert len(groups) == 1
        assert len(groups[0].records) == 2

    def test_small_files_pass_through_untouched(self, temp_dir):
        # Paths need not exist: groups within the prefix size are not read
        group = group_of([temp_dir / "x", temp_dir / "y"], 10)
        assert list(PrefixHashPrefilter(prefix_size=16).process([group])) == [group]

    def test_custom_algorithm(self, write_file):
        class ConstantHash:
            @staticmethod
            def hash(data):
                return b"same"

        a = write_file("a.bin", b"A" * 100)
        b = write_file("b.bin", b"B" * 100)
        groups = list(PrefixHashPrefilter(ConstantHash(), prefix_size=16).process([group_of([a, b], 100)]))
        assert len(groups) == 1

    def test_unreadable_file_raises(self, write_file, temp_dir):
        a = write_file("a.bin", b"A" * 100)
        with pytest.raises(ContentComparisonError):
            list(PrefixHashPrefilter(prefix_size=16).process([group_of([a, temp_dir / "gone"], 100)]))

    def test_rejects_non_positive_prefix(self):
        with pytest.raises(ValueError):
            PrefixHashPrefilter(prefix_size=0)
