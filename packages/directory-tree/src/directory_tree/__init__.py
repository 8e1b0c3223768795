from directory_tree.builder import build_tree
from directory_tree.components.metadata import MetadataRecord, RawEntry, extract
from directory_tree.components.node import Node
from directory_tree.components.scanner import walk_directory
from directory_tree.exceptions import (
    AmbiguousRootError,
    DirectoryTreeError,
    EnumerationError,
    PathResolutionError,
)

__all__ = [
    "AmbiguousRootError",
    "DirectoryTreeError",
    "EnumerationError",
    "MetadataRecord",
    "Node",
    "PathResolutionError",
    "RawEntry",
    "build_tree",
    "extract",
    "walk_directory",
]
