from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from dirtree.types import PathType


class BaseIgnoreRules(ABC):
    """
    Abstract base class defining the interface for entry ignore rules.

    The tree walker consults an ignore rules object for every directory entry it
    lists. Implementations decide from the entry's base name and its path whether
    the entry is left out of the tree. Loading rules from files and adding rules
    one at a time are optional capabilities.

    Example:
        >>> from dirtree.ignore_rules.glob_rules import GlobIgnoreRules
        >>> rules = GlobIgnoreRules(["*.pyc"])
        >>> rules.exclude("test.pyc")
        True
        >>> rules.exclude("test.py", "src/test.py")
        False
    """

    @abstractmethod
    def exclude(self, name: str, path: Optional[str] = None) -> bool:
        """
        Determine if a directory entry should be left out of the tree.

        Args:
            name (str): Base name of the entry.
            path (str, optional): Path of the entry as constructed during traversal.

        Returns:
            bool: True if the entry should be excluded, False if it should be rendered.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load ignore rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single ignore rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
