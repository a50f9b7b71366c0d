"""Directory tree traversal with ignore rules and a depth ceiling.

This module provides the TreeWalker class, which lists a directory recursively,
leaves out entries matched by ignore rules, and renders the remainder as a text
tree in the style of the Unix ``tree`` command.
"""

import locale
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence

from dirtree.ignore_rules.base_rules import BaseIgnoreRules
from dirtree.tree_walker.directory_entry import DirectoryEntry, scan_directory
from dirtree.tree_walker.tree_node import DEPTH_LIMIT_LABEL, UNREADABLE_LABEL, TreeNode
from dirtree.types import EntryKind, PathType

MAX_DEPTH = 50

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_PREFIX = "│   "
SPACE_PREFIX = "    "

ListEntries = Callable[[str], Sequence[DirectoryEntry]]


def sort_entries(entries: Sequence[DirectoryEntry]) -> List[DirectoryEntry]:
    """Order entries directories first, then files, each group by locale collation.

    Names that collate equally keep a stable order by comparing the raw names.

    Example:
        >>> entries = [
        ...     DirectoryEntry("b.txt", "./b.txt", False),
        ...     DirectoryEntry("src", "./src", True),
        ...     DirectoryEntry("a.txt", "./a.txt", False),
        ... ]
        >>> [e.name for e in sort_entries(entries)]
        ['src', 'a.txt', 'b.txt']
    """
    return sorted(entries, key=lambda e: (not e.is_dir, locale.strxfrm(e.name), e.name))


class TreeWalker:
    """A rendered text tree of a directory, honoring ignore rules and a depth limit.

    The tree is built lazily on first access. Every listing goes through
    ``list_entries``, so the filesystem can be replaced in tests. A directory that
    cannot be listed shows up with a single unreadable marker beneath it, and a
    directory deeper than ``max_depth`` shows a depth limit marker instead of its
    contents. Neither stops the rest of the traversal. Only a root directory that
    cannot be listed is an error.

    Symbolic Link Behavior:
        By default, a symlink is rendered as a file even if it points at a
        directory. With follow_symlinks=True it is rendered and descended like a
        directory; cycles are cut off by the depth ceiling.

    Attributes:
        root_path (Path): The directory being rendered.
        ignore_rules (Optional[BaseIgnoreRules]): Rules for leaving entries out.
        follow_symlinks (bool): Whether symlinks to directories are descended.
        max_depth (int): Deepest listing performed; deeper directories get a marker.

    Example:
        >>> walker = TreeWalker("src")  # doctest: +SKIP
        >>> print(walker.get_tree_representation())  # doctest: +SKIP
        📁 src
        ├── 📁 utils
        │   └── 📄 helpers.py
        └── 📄 main.py
    """

    def __init__(
        self,
        root_path: PathType,
        ignore_rules: Optional[BaseIgnoreRules] = None,
        follow_symlinks: bool = False,
        max_depth: int = MAX_DEPTH,
        list_entries: Optional[ListEntries] = None,
    ) -> None:
        """Initialize a TreeWalker.

        Args:
            root_path: Directory to render.
            ignore_rules: Rules for excluding entries. Defaults to None (nothing excluded).
            follow_symlinks: Whether to descend symlinks to directories. Defaults to False.
            max_depth: Depth ceiling. Defaults to 50.
            list_entries: Callable listing one directory. Defaults to an os.scandir
                based lister. It must raise OSError when a directory can't be listed.
        """
        self.root_path = Path(root_path)
        self.ignore_rules = ignore_rules
        self.follow_symlinks = follow_symlinks
        self.max_depth = max_depth
        self._list_entries = list_entries
        self._tree: Optional[TreeNode] = None
        self._file_count = 0
        self._directory_count = 0

    def list_entries(self, path: str) -> Sequence[DirectoryEntry]:
        if self._list_entries is not None:
            return self._list_entries(path)
        return scan_directory(path, follow_symlinks=self.follow_symlinks)

    def get_tree(self) -> TreeNode:
        """Get the root node of the tree, building it on first access.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If the root directory can't be listed.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        if self._list_entries is None:
            if not self.root_path.exists():
                raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
            if not self.root_path.is_dir():
                raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root = TreeNode(self._root_name(), kind=EntryKind.DIRECTORY, depth_level=0)
        self._add_children(root, str(self.root_path), 0)
        self._tree = root
        self._count_entries()

    def _root_name(self) -> str:
        # "." and other relative paths are shown by the real directory name
        return self.root_path.resolve().name or str(self.root_path.resolve())

    def _add_children(self, node: TreeNode, path: str, depth: int) -> None:
        """Populate ``node`` with the visible children of the directory at ``path``."""
        if depth > self.max_depth:
            TreeNode(DEPTH_LIMIT_LABEL, parent=node, kind=EntryKind.DEPTH_LIMIT, depth_level=depth)
            return

        try:
            entries = self.list_entries(path)
        except OSError:
            if node.is_root:
                raise
            TreeNode(UNREADABLE_LABEL, parent=node, kind=EntryKind.UNREADABLE, depth_level=depth)
            return

        visible = [entry for entry in entries if entry.name and entry.path and not self._is_ignored(entry)]

        for entry in sort_entries(visible):
            kind = EntryKind.DIRECTORY if entry.is_dir else EntryKind.FILE
            child = TreeNode(entry.name, parent=node, kind=kind, depth_level=depth + 1)
            if entry.is_dir:
                self._add_children(child, entry.path, depth + 1)

    def _is_ignored(self, entry: DirectoryEntry) -> bool:
        if self.ignore_rules is None:
            return False
        return self.ignore_rules.exclude(entry.name, entry.path)

    def _count_entries(self) -> None:
        self._file_count = 0
        self._directory_count = 0
        if self._tree is None:
            return
        for node in self._tree.descendants:
            if node.kind is EntryKind.DIRECTORY:
                self._directory_count += 1
            elif node.kind is EntryKind.FILE:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the number of rendered files."""
        if self._tree is None:
            self._build_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the number of rendered directories, excluding the root."""
        if self._tree is None:
            self._build_tree()
        return self._directory_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree representation one line at a time.

        The first line is the root directory itself. Each following line is the
        accumulated prefix, a branch connector, a directory or file marker and the
        entry name.

        Yields:
            Lines of the tree, without line terminators.

        Example:
            >>> walker = TreeWalker("src")  # doctest: +SKIP
            >>> for line in walker.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            📁 src
            ├── 📁 utils
            │   └── 📄 helpers.py
            └── 📄 main.py
        """
        root = self.get_tree()

        def write_children(node: TreeNode, prefix: str) -> Iterator[str]:
            children = node.children
            for i, child in enumerate(children):
                is_last = i == len(children) - 1
                connector = LAST_BRANCH if is_last else BRANCH
                yield f"{prefix}{connector}{child.label}"
                if child.children:
                    yield from write_children(child, prefix + (SPACE_PREFIX if is_last else PIPE_PREFIX))

        yield root.label
        yield from write_children(root, "")

    def get_tree_representation(self) -> str:
        """Get the complete tree as a single string.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If the root directory can't be listed.
        """
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Discard the cached tree and rebuild it from the current filesystem state."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self._build_tree()
