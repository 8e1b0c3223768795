import logging
import os
from collections.abc import Iterator

from ..exceptions import EnumerationError
from .metadata import RawEntry

logger = logging.getLogger(__name__)


def walk_directory(root: str, sort_entries: bool = True) -> Iterator[tuple[str, RawEntry]]:
    """
    Walk *root* recursively and yield ``(path, RawEntry)`` for every entry,
    the root itself first.

    Entries are produced in pre-order: a directory is followed by its whole
    subtree before its next sibling. Symlinks are reported but not followed.

    Args:
        root:         Absolute path to start from.
        sort_entries: Visit the entries of each directory in name order.

    Raises:
        EnumerationError: On the first entry that cannot be read. The walk
                          does not skip failing entries.
    """
    try:
        root_stat = os.lstat(root)
    except OSError as exc:
        raise EnumerationError(root, exc.strerror or str(exc)) from exc

    stack = [(root, RawEntry.from_stat(os.path.basename(root) or root, root_stat))]
    while stack:
        path, entry = stack.pop()
        yield path, entry
        if entry.is_dir:
            stack.extend(reversed(_list_directory(path, sort_entries)))


def _list_directory(path: str, sort_entries: bool) -> list[tuple[str, RawEntry]]:
    entries: list[tuple[str, RawEntry]] = []
    try:
        with os.scandir(path) as it:
            for dir_entry in it:
                st = dir_entry.stat(follow_symlinks=False)
                entries.append((dir_entry.path, RawEntry.from_stat(dir_entry.name, st)))
    except OSError as exc:
        failed = exc.filename if isinstance(exc.filename, str) else path
        raise EnumerationError(failed, exc.strerror or str(exc)) from exc

    if sort_entries:
        entries.sort(key=lambda item: item[1].name)
    logger.debug("Listed %d entries in %s", len(entries), path)
    return entries
