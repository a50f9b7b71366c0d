"""Node representation for lines of the rendered tree."""

from typing import Any, Optional

from anytree import Node

from dirtree.types import EntryKind

DIRECTORY_MARKER = "📁 "
FILE_MARKER = "📄 "
DEPTH_LIMIT_LABEL = "⚠️ [depth limit reached]"
UNREADABLE_LABEL = "❌ [unreadable directory]"


class TreeNode(Node):  # type: ignore
    """Node class representing one line of the directory tree.

    Extends anytree.Node with the kind of entry the line stands for and the
    traversal depth at which it was produced. Marker nodes (depth limit,
    unreadable directory) are always leaves.

    Attributes:
        name (str): Base name of the entry, or the marker label.
        kind (EntryKind): What the node represents.
        depth_level (int): Traversal depth of the listing that produced the node.

    Example:
        >>> root = TreeNode("project", kind=EntryKind.DIRECTORY)
        >>> child = TreeNode("main.py", parent=root, kind=EntryKind.FILE, depth_level=1)
        >>> child.label
        '📄 main.py'
        >>> root.is_dir
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        kind: EntryKind = EntryKind.FILE,
        depth_level: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.kind = kind
        self.depth_level = depth_level

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_marker(self) -> bool:
        return self.kind in (EntryKind.DEPTH_LIMIT, EntryKind.UNREADABLE)

    @property
    def label(self) -> str:
        """The text drawn after the connector."""
        if self.kind is EntryKind.DIRECTORY:
            return f"{DIRECTORY_MARKER}{self.name}"
        if self.kind is EntryKind.FILE:
            return f"{FILE_MARKER}{self.name}"
        return str(self.name)
