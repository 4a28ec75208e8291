"""Unit tests for the EntryType filter."""

import pytest

from bfsfind.types import EntryType


def test_entry_type_values():
    assert [entry_type.value for entry_type in EntryType] == ["all", "file", "dir"]
    assert EntryType("dir") is EntryType.DIRECTORY


@pytest.mark.parametrize(
    "entry_type,is_dir,expected",
    [
        (EntryType.ALL, True, True),
        (EntryType.ALL, False, True),
        (EntryType.FILE, True, False),
        (EntryType.FILE, False, True),
        (EntryType.DIRECTORY, True, True),
        (EntryType.DIRECTORY, False, False),
    ],
)
def test_entry_type_accepts(entry_type, is_dir, expected):
    assert entry_type.accepts(is_dir) is expected


def test_unknown_entry_type():
    with pytest.raises(ValueError):
        EntryType("directory")
