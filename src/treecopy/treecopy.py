"""Public entry points for recursive copies.

This module provides the two functions most callers need: copy() for a plain
recursive copy and copy_with_skip() for a copy that leaves selected paths out.
"""

from typing import Optional, Sequence

from treecopy.options import Options
from treecopy.tree_copier.tree_copier import TreeCopier
from treecopy.types import PathType


def copy(src: PathType, dest: PathType, options: Optional[Options] = None) -> None:
    """Copy src to dest, whether src is a file, a directory or a symlink.

    Equivalent to copy_with_skip() with nothing to skip.

    Args:
        src: The entry to copy.
        dest: Where to create the copy.
        options: Copy settings. Defaults to DEFAULT_OPTIONS; an Options value without
            a symlink policy recreates links as links.

    Raises:
        OSError: The first filesystem error encountered; the copy stops there.

    Example:
        >>> copy("a", "out")  # doctest: +SKIP
    """
    copy_with_skip(src, dest, (), options)


def copy_with_skip(
    src: PathType, dest: PathType, to_skip: Sequence[PathType], options: Optional[Options] = None
) -> None:
    """Copy src to dest, leaving out the given paths.

    Args:
        src: The entry to copy.
        dest: Where to create the copy.
        to_skip: Source paths to exclude. Entries may use "/" or the platform separator
            and are compared by exact match against each path visited, which is src
            joined with the relative path of the entry (e.g. "a/b/file.txt" when copying
            "a"). Descendants of a skipped directory are never visited.
        options: Copy settings. Defaults to DEFAULT_OPTIONS.

    Raises:
        OSError: The first filesystem error encountered; the copy stops there.
        TypeError: If to_skip is a single path instead of a sequence of paths.

    Example:
        >>> copy_with_skip("a", "out", ["a/b"])  # doctest: +SKIP
    """
    TreeCopier(options).copy(src, dest, to_skip)
