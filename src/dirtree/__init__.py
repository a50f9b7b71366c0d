"""Directory tree rendering utilities.

This package walks a directory, drops entries matching glob-lite ignore rules,
and renders what remains as an indented text tree.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"
