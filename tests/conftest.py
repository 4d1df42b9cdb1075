"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from space_scanner.utils.logging import clear_scan_id

type FileFactory = Callable[[Path, int], Path]


@pytest.fixture
def make_file() -> FileFactory:
    """Return a factory writing a file of exactly ``size`` bytes.

    Parent directories are created as needed.
    """

    def factory(path: Path, size: int) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"x" * size)
        return path

    return factory


@pytest.fixture
def scenario_root(tmp_path: Path, make_file: FileFactory) -> Path:
    """Build the reference tree used across listing tests.

    Layout::

        root/
            docs/
                a.txt            10 bytes
                .hidden/
                    b.txt      1000 bytes
            c.txt                 5 bytes
    """
    root = tmp_path / "root"
    _ = make_file(root / "docs" / "a.txt", 10)
    _ = make_file(root / "docs" / ".hidden" / "b.txt", 1000)
    _ = make_file(root / "c.txt", 5)
    return root


@pytest.fixture
def deep_chain(tmp_path: Path, make_file: FileFactory) -> Path:
    """Build a directory with one file at each nesting level 0 through 5.

    File at level ``n`` holds ``10 ** n`` bytes so each level's contribution
    is identifiable in the total::

        chain/f0 (1)  chain/l1/f1 (10)  ...  chain/l1/l2/l3/l4/l5/f5 (100000)
    """
    chain = tmp_path / "chain"
    current = chain
    for level in range(6):
        if level > 0:
            current = current / f"l{level}"
        _ = make_file(current / f"f{level}", 10**level)
    return chain


@pytest.fixture(autouse=True)
def _reset_scan_id() -> None:
    """Keep the scan ID context variable from leaking between tests."""
    clear_scan_id()
