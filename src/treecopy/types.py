from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of entry kinds recognized while copying.

    The kind decides which copy strategy is applied to an entry. Anything that is
    neither a directory nor a symbolic link (regular files, but also FIFOs or device
    nodes) is reported as FILE and copied byte for byte.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
