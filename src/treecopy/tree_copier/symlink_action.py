"""Symlink action enum for choosing how symbolic links are copied."""

from enum import Enum


class SymlinkAction(str, Enum):
    """Action to take when a symbolic link is encountered during a copy.

    Values:
        SHALLOW: Recreate the link itself, pointing at the identical target string (default behavior)
        DEEP: Copy the content of whatever the link ultimately points at in place of the link
        SKIP: Leave the link out of the copy without raising an error
    """

    SHALLOW = "shallow"
    DEEP = "deep"
    SKIP = "skip"
