import json
import weakref
from collections.abc import Iterator
from typing import List, Optional

from pydantic import BaseModel, Field, PrivateAttr

from .metadata import MetadataRecord


class Node(BaseModel):
    """One filesystem entry in a directory tree.

    ``children`` owns the subtree. ``parent`` is a weak back-reference: it is
    never serialized and resolves to ``None`` for the root, or once the tree
    that owned this node has been released.

    Nodes compare and hash by identity; ``full_path`` is unique within a tree.
    """

    full_path: str = Field(serialization_alias="path")
    info: MetadataRecord
    children: List["Node"] = Field(default_factory=list)

    _parent: Optional[weakref.ReferenceType] = PrivateAttr(default=None)

    @property
    def parent(self) -> Optional["Node"]:
        return self._parent() if self._parent is not None else None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def _add_child(self, child: "Node") -> None:
        child._parent = weakref.ref(self)
        self.children.append(child)

    def iter_files(self, extension: str = "") -> Iterator["Node"]:
        return iter_files(self, extension)

    def collect_files(self, extension: str = "") -> list["Node"]:
        """Return every descendant file, optionally only those with *extension*.

        Args:
            extension: Exact, case-sensitive extension including the leading
                       dot (``".go"``). Empty means every file.
        """
        return list(iter_files(self, extension))

    def iter_nodes(self) -> Iterator["Node"]:
        return iter_nodes(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize the subtree like ``model_dump_json(by_alias=True)``, at any depth."""
        return "".join(iter_json(self, indent))

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return f"Node({self.full_path!r}, children={len(self.children)})"


Node.model_rebuild()


def iter_files(node: Node, extension: str = "") -> Iterator[Node]:
    """Lazily yield the files below *node*, depth first in children order.

    Directories are descended into but never yielded, and *node* itself is
    never part of the result. Uses an explicit stack so arbitrarily deep trees
    do not hit the recursion limit.
    """
    stack = [iter(node.children)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
        elif child.info.is_dir:
            stack.append(iter(child.children))
        elif not extension or child.info.extension == extension:
            yield child


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield *node* and all of its descendants in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


def iter_json(node: Node, indent: int = 2) -> Iterator[str]:
    """Yield the JSON text of *node* and its subtree in chunks.

    Produces the ``{path, info, children}`` shape with ``info`` on one line.
    The nesting is written from an explicit stack, so the depth of the tree
    is not bounded by the recursion limit or the serializer's depth guard.
    """
    stack: list[tuple[object, int]] = [(node, 0)]
    while stack:
        item, level = stack.pop()
        if isinstance(item, str):
            yield item
            continue

        outer = "\n" + " " * (indent * level)
        inner = "\n" + " " * (indent * (level + 1))
        info = json.dumps(item.info.model_dump(mode="json"))
        yield (
            f"{{{inner}\"path\": {json.dumps(item.full_path)},"
            f"{inner}\"info\": {info},"
            f"{inner}\"children\": "
        )
        if not item.children:
            yield f"[]{outer}}}"
            continue

        child_pad = "\n" + " " * (indent * (level + 2))
        stack.append((f"{inner}]{outer}}}", level))
        last = len(item.children) - 1
        for i, child in enumerate(reversed(item.children)):
            stack.append((child, level + 2))
            stack.append(("[" + child_pad if i == last else "," + child_pad, level))
