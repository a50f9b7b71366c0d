from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of the kinds of lines that appear in a rendered tree.

    Attributes:
        DIRECTORY: A directory that was listed (or attempted) during traversal
        FILE: Anything that is not a directory
        DEPTH_LIMIT: Marker emitted in place of a listing beyond the depth ceiling
        UNREADABLE: Marker emitted when a directory could not be listed
    """

    DIRECTORY = "directory"
    FILE = "file"
    DEPTH_LIMIT = "depth_limit"
    UNREADABLE = "unreadable"
