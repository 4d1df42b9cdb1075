"""Unit tests for listing order."""

import pytest

from space_scanner.core.filesystem.sort_policy import sort_entries, sort_key
from space_scanner.types.models import DirectoryEntry


def entry(name: str, size: int, *, is_directory: bool = False) -> DirectoryEntry:
    return DirectoryEntry(name=name, path=f"/root/{name}", is_directory=is_directory, size_bytes=size)


@pytest.mark.unit
class TestSortEntries:
    """Test directory-first, size-descending ordering."""

    def test_empty_input(self) -> None:
        assert sort_entries([]) == []

    def test_directories_precede_files_regardless_of_size(self) -> None:
        big_file = entry("big.iso", 10_000)
        small_dir = entry("tiny", 1, is_directory=True)

        result = sort_entries([big_file, small_dir])

        assert result == [small_dir, big_file]

    def test_each_group_sorted_by_descending_size(self) -> None:
        entries = [
            entry("f1", 5),
            entry("d1", 100, is_directory=True),
            entry("f2", 50),
            entry("d2", 300, is_directory=True),
            entry("f3", 0),
            entry("d3", 200, is_directory=True),
        ]

        result = sort_entries(entries)

        assert [e.name for e in result] == ["d2", "d3", "d1", "f2", "f1", "f3"]

    def test_ties_keep_enumeration_order(self) -> None:
        entries = [entry("b", 7), entry("a", 7), entry("c", 7)]

        assert [e.name for e in sort_entries(entries)] == ["b", "a", "c"]

    def test_returns_new_list(self) -> None:
        entries = [entry("a", 1), entry("b", 2)]

        result = sort_entries(entries)

        assert result is not entries
        assert [e.name for e in entries] == ["a", "b"]

    def test_accepts_any_iterable(self) -> None:
        result = sort_entries(e for e in [entry("a", 1), entry("b", 2)])

        assert [e.name for e in result] == ["b", "a"]


@pytest.mark.unit
class TestSortKey:
    """Test the key function directly."""

    def test_directory_key_sorts_before_file_key(self) -> None:
        assert sort_key(entry("d", 0, is_directory=True)) < sort_key(entry("f", 10**12))

    def test_larger_size_sorts_first_within_group(self) -> None:
        assert sort_key(entry("big", 10)) < sort_key(entry("small", 9))
