"""Directory entries as seen by the tree walker."""

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class DirectoryEntry:
    """One child found while listing a directory.

    Attributes:
        name: Base name of the entry.
        path: Path of the entry, used for ignore matching and for recursion.
        is_dir: Whether the entry is a directory.
    """

    name: str
    path: str
    is_dir: bool


def scan_directory(path: str, follow_symlinks: bool = False) -> List[DirectoryEntry]:
    """List the immediate children of a directory.

    Args:
        path: Directory to list.
        follow_symlinks: Whether a symlink to a directory counts as a directory.

    Returns:
        The children in the order the operating system returned them.

    Raises:
        OSError: If the directory cannot be listed (missing, not a directory,
            permission denied).
    """
    entries = []
    with os.scandir(path) as it:
        for entry in it:
            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
            except OSError:
                # If we can't stat it, treat as a non-directory
                is_dir = False
            entries.append(DirectoryEntry(name=entry.name, path=entry.path, is_dir=is_dir))
    return entries
