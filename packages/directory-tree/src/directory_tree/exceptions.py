class DirectoryTreeError(Exception):
    """Base class for every error raised while building a directory tree."""


class PathResolutionError(DirectoryTreeError):
    """The root path could not be turned into an absolute path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Could not resolve path: {path!r}")


class EnumerationError(DirectoryTreeError):
    """The walk failed on an entry; no partial tree is produced.

    Attributes:
        path:   The entry the walk failed on.
        reason: Human readable description of the failure.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to enumerate {path}: {reason}")


class AmbiguousRootError(DirectoryTreeError):
    """More than one walked entry has no parent among the walked entries."""

    def __init__(self, candidates: list[str]) -> None:
        self.candidates = candidates
        super().__init__(
            f"Walk produced {len(candidates)} root candidates: {', '.join(candidates)}"
        )
