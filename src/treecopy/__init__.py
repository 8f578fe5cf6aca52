"""Recursive filesystem copy utilities.

This package copies files, directory trees and symbolic links from one location to
another, replicating permission bits and directory structure, with configurable
symlink handling and path exclusion.
"""

from importlib.metadata import PackageNotFoundError, version

from treecopy.options import DEFAULT_OPTIONS, Options
from treecopy.tree_copier.symlink_action import SymlinkAction
from treecopy.tree_copier.tree_copier import TreeCopier
from treecopy.treecopy import copy, copy_with_skip

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treecopy")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "DEFAULT_OPTIONS",
    "Options",
    "SymlinkAction",
    "TreeCopier",
    "copy",
    "copy_with_skip",
]
