"""Report header composition.

A report is a short header describing the run, followed by the rendered tree.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from dirtree.types import PathType

OUTPUT_FILE_NAME = "directory-tree.txt"
SEPARATOR = "=" * 60
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_header(root: PathType, ignore_source: str, generated_at: Optional[datetime] = None) -> str:
    """Build the header placed above the tree.

    Args:
        root: Directory being rendered. Shown as a resolved absolute path.
        ignore_source: Where the ignore rules came from.
        generated_at: Generation time. Defaults to now.

    Returns:
        The header lines, the separator, and a blank line.

    Example:
        >>> print(format_header("/srv/app", "none", datetime(2024, 1, 2, 3, 4, 5)), end="")
        Directory Tree
        Generated: 2024-01-02 03:04:05
        Root: /srv/app
        Ignore source: none
        ============================================================
        <BLANKLINE>
    """
    if generated_at is None:
        generated_at = datetime.now()
    lines = [
        "Directory Tree",
        f"Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}",
        f"Root: {Path(root).resolve()}",
        f"Ignore source: {ignore_source}",
        SEPARATOR,
        "",
    ]
    return "\n".join(lines) + "\n"


def compose_report(header: str, tree: str) -> str:
    """Join the header and the rendered tree into the final text."""
    return f"{header}{tree}\n"
