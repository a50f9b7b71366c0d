"""Ignore rules for filtering files and directories out of the rendered tree."""

from .base_rules import BaseIgnoreRules
from .glob_pattern import IgnorePattern, matches, matches_any
from .glob_rules import GlobIgnoreRules, parse_ignore_lines

__all__ = [
    "BaseIgnoreRules",
    "GlobIgnoreRules",
    "IgnorePattern",
    "matches",
    "matches_any",
    "parse_ignore_lines",
]
