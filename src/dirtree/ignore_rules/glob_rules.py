"""Implementation of ignore rules using glob-lite patterns."""

from os import PathLike
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from dirtree.types import PathType

from .base_rules import BaseIgnoreRules
from .glob_pattern import IgnorePattern, matches_any


def parse_ignore_lines(lines: Iterable[str]) -> List[str]:
    """Trim each line and drop blank lines and ``#`` comments.

    Example:
        >>> parse_ignore_lines(["# comment", "  node_modules  ", "", "*.log"])
        ['node_modules', '*.log']
    """
    rules = []
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            rules.append(stripped)
    return rules


class GlobIgnoreRules(BaseIgnoreRules):
    """Ignore rules backed by a list of compiled glob-lite patterns.

    Each rule is compiled into an :class:`IgnorePattern`. An entry is excluded
    when any pattern matches its base name in full (or the base name of its
    path). Rule order does not matter since there is no negation.

    With no rules at all nothing is excluded.

    Attributes:
        patterns (List[IgnorePattern]): Compiled patterns, in the order they were added.

    Example:
        >>> rules = GlobIgnoreRules(["node_modules", "*.log"])
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("my_node_modules")
        False
        >>> rules.exclude("build.log", "./logs/build.log")
        True
        >>> GlobIgnoreRules().exclude("anything")
        False
    """

    def __init__(self, rules: Optional[Iterable[str]] = None):
        """Initialize GlobIgnoreRules with an optional list of rule strings.

        Args:
            rules: Trimmed, non-comment rule strings. Each one is compiled as given.
        """
        self.patterns: List[IgnorePattern] = []

        if rules is not None:
            for rule in rules:
                self.patterns.append(IgnorePattern(rule))

    @property
    def rules(self) -> List[str]:
        """The original rule strings, in the order they were added."""
        return [pattern.rule for pattern in self.patterns]

    def exclude(self, name: str, path: Optional[str] = None) -> bool:
        """Check if an entry should be left out of the tree.

        Args:
            name: Base name of the entry.
            path: Path of the entry. Its base name is tested too.

        Returns:
            bool: True if any rule fully matches the name or the path's base name.

        Example:
            >>> rules = GlobIgnoreRules(["?.txt"])
            >>> rules.exclude("a.txt")
            True
            >>> rules.exclude("ab.txt")
            False
        """
        return matches_any(self.patterns, name, path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load rules from one or more ignore files.

        Lines are trimmed; blank lines and lines starting with ``#`` are skipped.

        Args:
            rules_files: Path(s) to ignore files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            rules = parse_ignore_lines(path.read_text(encoding="utf-8").splitlines())
            self.patterns.extend(IgnorePattern(rule) for rule in rules)

    def add_rule(self, rule: str) -> None:
        """Add a single glob-lite rule.

        Example:
            >>> rules = GlobIgnoreRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.exclude("test.pyc")
            True
        """
        self.patterns.append(IgnorePattern(rule))

    def __len__(self) -> int:
        return len(self.patterns)
