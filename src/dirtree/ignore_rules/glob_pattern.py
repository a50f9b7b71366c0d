"""Glob-lite pattern compilation.

Only three characters are special in an ignore rule: ``*`` matches any run of
characters (including none), ``?`` matches exactly one character, and ``.``
matches a literal dot. Everything else, regex metacharacters included, matches
itself. A rule must match the whole candidate name.
"""

import os
import re
from typing import Iterable, Optional, Tuple

from pathspec.pattern import RegexPattern


class IgnorePattern(RegexPattern):
    """A compiled glob-lite ignore rule.

    The translation to a regular expression happens in :meth:`pattern_to_regex`,
    which pathspec calls while constructing the pattern. The original rule text
    stays available as :attr:`rule`.

    Example:
        >>> pattern = IgnorePattern("*.log")
        >>> pattern.rule
        '*.log'
        >>> pattern.matches("server.log")
        True
        >>> pattern.matches("server.logx")
        False
        >>> IgnorePattern("a+b").matches("a+b")
        True
    """

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> Tuple[str, bool]:
        """Translate a glob-lite rule into an anchored regular expression.

        Args:
            pattern: The rule text.

        Returns:
            The regular expression source and ``True`` (every rule excludes).
        """
        parts = []
        for char in pattern:
            if char == "*":
                parts.append(".*")
            elif char == "?":
                parts.append(".")
            else:
                parts.append(re.escape(char))
        return "(?s)^" + "".join(parts) + r"\Z", True

    @property
    def rule(self) -> str:
        return str(self.pattern)

    def matches(self, name: str, path: Optional[str] = None) -> bool:
        """Check the entry name, and the base name of its path, against this rule.

        Args:
            name: Base name of the entry.
            path: Path of the entry. Its base name is checked as well, which only
                differs from ``name`` when paths are normalized differently.

        Returns:
            True if either candidate is matched in full.
        """
        if self.match_file(name):
            return True
        if path:
            base_name = os.path.basename(os.path.normpath(path))
            if base_name != name and self.match_file(base_name):
                return True
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rule!r})"


def matches(pattern: IgnorePattern, name: str, path: Optional[str] = None) -> bool:
    """Return True if ``pattern`` fully matches ``name`` or the base name of ``path``."""
    return pattern.matches(name, path)


def matches_any(patterns: Iterable[IgnorePattern], name: str, path: Optional[str] = None) -> bool:
    """Return True if any pattern matches. An empty collection matches nothing."""
    return any(pattern.matches(name, path) for pattern in patterns)
