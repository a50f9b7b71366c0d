"""Directory tree report generation.

This module ties the tree walker and the report header together into the text
that is written to the output file.
"""

from datetime import datetime
from typing import Optional, Union

from dirtree.config.ignore_file import IgnoreSource
from dirtree.ignore_rules.base_rules import BaseIgnoreRules
from dirtree.report import compose_report, format_header
from dirtree.tree_walker.tree_walker import MAX_DEPTH, TreeWalker
from dirtree.types import PathType


class DirTree:
    """Directory tree generator producing the complete report text.

    The rendered tree is computed once and cached, so the body is identical for
    every call on the same instance. Create a new instance (or call refresh) to
    pick up filesystem changes.

    Attributes:
        directory (PathType): Directory being rendered.

    Example:
        >>> from dirtree.ignore_rules.glob_rules import GlobIgnoreRules
        >>> generator = DirTree(".", ignore_rules=GlobIgnoreRules(["node_modules"]))  # doctest: +SKIP
        >>> print(generator.generate_report("built-in defaults"))  # doctest: +SKIP
        Directory Tree
        Generated: 2024-01-02 03:04:05
        ...

    Raises:
        FileNotFoundError: If the directory doesn't exist when the tree is built.
        NotADirectoryError: If the directory isn't a directory.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        ignore_rules: Optional[BaseIgnoreRules] = None,
        follow_symlinks: bool = False,
        max_depth: int = MAX_DEPTH,
    ):
        self.directory = directory
        self._walker = TreeWalker(
            directory, ignore_rules, follow_symlinks=follow_symlinks, max_depth=max_depth
        )

    @property
    def walker(self) -> TreeWalker:
        return self._walker

    @property
    def tree_text(self) -> str:
        """The rendered tree, starting with the root line."""
        return self._walker.get_tree_representation()

    @property
    def directory_count(self) -> int:
        return self._walker.get_directory_count()

    @property
    def file_count(self) -> int:
        return self._walker.get_file_count()

    def generate_report(
        self, ignore_source: Union[str, IgnoreSource], generated_at: Optional[datetime] = None
    ) -> str:
        """Compose the header and the rendered tree.

        Args:
            ignore_source: The IgnoreSource used for this run, or its identifier.
            generated_at: Timestamp for the header. Defaults to now.

        Returns:
            The full report text, ending with a newline.
        """
        if isinstance(ignore_source, IgnoreSource):
            ignore_source = ignore_source.source
        tree = self.tree_text
        return compose_report(format_header(self.directory, ignore_source, generated_at), tree)

    def refresh(self) -> None:
        """Rebuild the tree from the current filesystem state."""
        self._walker.refresh()
