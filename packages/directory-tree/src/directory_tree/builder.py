"""
DirectoryTree - walks a directory and assembles the entries into a linked tree.

Every file and directory becomes a :class:`Node`; serialized it looks like:

{
  "path": <absolute path of the entry>,
  "info": {
    "name": <base name>,
    "size": <size in bytes>,
    "mode": <permission and type bits>,
    "mod_time": <last modification time, ISO 8601>,
    "is_dir": <true for directories>,
    "extension": <name from its last dot onward, or "">
  },
  "children": [<nodes of the direct children>]
}

The parent of each node is recovered from its path alone, so any walker that
yields ``(path, RawEntry)`` pairs for a single connected subtree can be used.

Usage (CLI):
    directory-tree <directory> [--files] [--ext .py] [--output <file.json>]

Usage (library):
    from directory_tree import build_tree
    root = build_tree("/path/to/dir")
    sources = root.collect_files(".py")
"""

import argparse
import json
import logging
import os
import sys
from collections.abc import Callable, Iterable
from functools import partial
from typing import Optional

from directory_tree.components.metadata import RawEntry, extract
from directory_tree.components.node import Node
from directory_tree.components.scanner import walk_directory
from directory_tree.config import settings
from directory_tree.exceptions import (
    AmbiguousRootError,
    DirectoryTreeError,
    EnumerationError,
    PathResolutionError,
)

logger = logging.getLogger(__name__)

Walker = Callable[[str], Iterable[tuple[str, RawEntry]]]


def build_tree(
    root: str,
    walker: Optional[Walker] = None,
    *,
    strict_root: Optional[bool] = None,
) -> Node:
    """Walk *root* and return the root :class:`Node` of the assembled tree.

    Args:
        root:        Path to the directory (or file) to walk, absolute or relative.
        walker:      Callable yielding ``(path, RawEntry)`` for the absolute root
                     and everything below it. Defaults to :func:`walk_directory`.
        strict_root: Raise :class:`AmbiguousRootError` when more than one entry
                     has no parent among the walked entries. When false the
                     last such entry becomes the root. Defaults to
                     ``settings.strict_root``.

    Raises:
        PathResolutionError: *root* could not be made absolute.
        EnumerationError:    The walk failed; no partial tree is returned.
        AmbiguousRootError:  Several root candidates in strict mode.
    """
    try:
        abs_root = os.path.abspath(root)
    except (OSError, ValueError) as exc:
        raise PathResolutionError(root) from exc

    if walker is None:
        walker = partial(walk_directory, sort_entries=settings.sort_entries)
    if strict_root is None:
        strict_root = settings.strict_root

    logger.info("Building directory tree for: %s", abs_root)
    nodes = _materialize(abs_root, walker)
    result = _link(nodes, strict_root)
    logger.debug("Assembled %d nodes under %s", len(nodes), result.full_path)
    return result


def _materialize(abs_root: str, walker: Walker) -> dict[str, Node]:
    """Create one unlinked node per walked entry, keyed by path."""
    nodes: dict[str, Node] = {}
    try:
        for path, raw in walker(abs_root):
            if path in nodes:
                logger.warning("Walk reported %s more than once; keeping the latest entry", path)
            nodes[path] = Node(full_path=path, info=extract(raw))
    except OSError as exc:
        failed = exc.filename if isinstance(exc.filename, str) else abs_root
        raise EnumerationError(failed, exc.strerror or str(exc)) from exc

    if not nodes:
        raise EnumerationError(abs_root, "walk produced no entries")
    return nodes


def _link(nodes: dict[str, Node], strict_root: bool) -> Node:
    """Attach every node to the node of its parent directory and return the root."""
    candidates: list[Node] = []
    for path, node in nodes.items():
        parent_path = os.path.dirname(path)
        # "/" is its own dirname
        parent = nodes.get(parent_path) if parent_path != path else None
        if parent is None:
            candidates.append(node)
        else:
            parent._add_child(node)

    if len(candidates) > 1:
        paths = [c.full_path for c in candidates]
        if strict_root:
            raise AmbiguousRootError(paths)
        logger.warning(
            "Walk produced %d root candidates, using the last one: %s", len(paths), paths[-1]
        )
    return candidates[-1]


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Walk a directory and output it as a JSON tree."
    )
    parser.add_argument("directory", help="Root directory to walk")
    parser.add_argument(
        "--files",
        action="store_true",
        help="Output the list of file paths instead of the tree",
    )
    parser.add_argument(
        "--ext",
        metavar="EXT",
        default="",
        help="Only list files with this extension, e.g. .py (implies --files)",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE instead of stdout",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        root = build_tree(args.directory)
    except DirectoryTreeError as exc:
        logger.error("%s", exc)
        return 1

    if args.files or args.ext:
        files = root.collect_files(args.ext)
        output = json.dumps([f.full_path for f in files], indent=2)
        count = len(files)
    else:
        output = root.to_json(indent=2)
        count = sum(1 for _ in root.iter_nodes())

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Tree written to {args.output} ({count} nodes)")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
