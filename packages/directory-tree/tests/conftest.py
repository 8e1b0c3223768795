"""Shared fixtures for the directory_tree test suite."""

import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from directory_tree.components.metadata import RawEntry
from directory_tree.exceptions import EnumerationError

DIR_MODE = stat.S_IFDIR | 0o755
FILE_MODE = stat.S_IFREG | 0o644


def make_tree(base: Path, layout: dict) -> Path:
    """Create *layout* under *base*; dict values are subdirectories, str values file contents."""
    base.mkdir(parents=True, exist_ok=True)
    for name, content in layout.items():
        if isinstance(content, dict):
            make_tree(base / name, content)
        else:
            (base / name).write_text(content, encoding="utf-8")
    return base


def raw_entry(path: str, is_dir: bool, size: int = 0) -> RawEntry:
    return RawEntry(
        name=os.path.basename(path) or path,
        size=size,
        mode=DIR_MODE if is_dir else FILE_MODE,
        mtime=1_700_000_000.0,
        is_dir=is_dir,
    )


def fake_walker(
    entries: list[tuple[str, bool]], fail_on: str | None = None
) -> Callable[[str], Iterator[tuple[str, RawEntry]]]:
    """Return a walker that replays *entries* regardless of the requested root.

    When *fail_on* is given the walker raises :class:`EnumerationError` on
    reaching that path, after having yielded the entries before it.
    """

    def walk(_root: str) -> Iterator[tuple[str, RawEntry]]:
        for path, is_dir in entries:
            if path == fail_on:
                raise EnumerationError(path, "Permission denied")
            yield path, raw_entry(path, is_dir)

    return walk


@pytest.fixture()
def scenario_entries() -> list[tuple[str, bool]]:
    """/root with a.txt and sub/b.go, in walk order."""
    return [
        ("/root", True),
        ("/root/a.txt", False),
        ("/root/sub", True),
        ("/root/sub/b.go", False),
    ]
