"""Recursive copy engine with per-kind dispatch.

This module provides the TreeCopier class, which walks a source entry depth first
and copies every regular file, directory and symbolic link it finds to the
destination, replicating permission bits along the way.
"""

import logging
import os
import shutil
from typing import Iterable, Optional

from treecopy.options import DEFAULT_OPTIONS, Options
from treecopy.tree_copier.entry_info import EntryInfo
from treecopy.tree_copier.error_slot import FirstErrorSlot
from treecopy.tree_copier.skip_set import SkipSet
from treecopy.tree_copier.symlink_action import SymlinkAction
from treecopy.types import PathType

logger = logging.getLogger(__name__)

# Destination directories are created writable so their contents can be copied even
# when the source directory is read-only; the real mode is restored afterwards.
TEMPORARY_DIRECTORY_MODE = 0o755

# Mode for parent directories created implicitly when copying a single file.
PARENT_DIRECTORY_MODE = 0o777


class TreeCopier:
    """Copies files, directory trees and symbolic links like "cp -a".

    The copier stats the source once without following symlinks and dispatches on
    the kind of entry found:

    - Regular files are copied byte for byte and receive the source's permission bits.
    - Directories are created with a temporary writable mode, populated recursively
      in name order, and then given the source directory's permission bits. The
      restoration happens even when copying the contents fails.
    - Symbolic links are handled according to the symlink policy of the options:
      recreated as links (SHALLOW), replaced by a copy of what they point at (DEEP),
      or left out (SKIP).

    Copying is fail fast. The first error raised anywhere in the tree stops the
    traversal and propagates to the caller unchanged; whatever was already written
    stays on disk. When an operation and one of its cleanup steps (closing a file,
    restoring a directory mode) both fail, the error that happened first is raised.

    Symbolic Link Behavior:
        A DEEP link is resolved and its target is copied with an empty skip set, so
        skipped paths and exclusion rules do not apply below a dereferenced link.
        Symlink cycles are not detected; a cycle copied with DEEP recurses until the
        operating system or the interpreter's recursion limit stops it.

    Attributes:
        options (Options): The settings used for every copy made by this instance.

    Example:
        >>> copier = TreeCopier()  # doctest: +SKIP
        >>> copier.copy("project", "backup/project", to_skip=["project/.git"])  # doctest: +SKIP
    """

    def __init__(self, options: Optional[Options] = None) -> None:
        """Initialize a TreeCopier.

        Args:
            options: Copy settings. Defaults to DEFAULT_OPTIONS.
        """
        self.options = options if options is not None else DEFAULT_OPTIONS

    def copy(self, src: PathType, dest: PathType, to_skip: Optional[Iterable[PathType]] = None) -> None:
        """Copy src to dest, whatever kind of entry src is.

        Args:
            src: The file, directory or symlink to copy.
            dest: Where to create the copy.
            to_skip: Paths to leave out of the copy. Each is compared by exact match,
                after normalization, against the source paths visited during the
                traversal (e.g. "src/build" when copying "src").

        Raises:
            FileNotFoundError: If src, or a descendant removed during the copy, does not exist.
            PermissionError: If an entry cannot be read or the destination cannot be written.
            FileExistsError: If a non-directory is in the way of a directory to create.
            OSError: For any other failure of the underlying filesystem calls.
            TypeError: If to_skip is a single path instead of a sequence of paths.
        """
        if isinstance(to_skip, (str, os.PathLike)):
            raise TypeError(f"to_skip must be a sequence of paths, not a single path: {to_skip!r}")
        src = os.fspath(src)
        dest = os.fspath(dest)
        skip_set = SkipSet(to_skip or (), exclusion_rules=self.options.exclusion_rules, root=src)
        info = EntryInfo.from_path(src)
        logger.debug("Copying %s to %s (%d skipped paths)", src, dest, len(skip_set))
        self._dispatch(src, dest, skip_set, info)

    def _dispatch(self, src: str, dest: str, to_skip: SkipSet, info: EntryInfo) -> None:
        """Route an entry to the copy strategy for its kind.

        Because this method is called recursively, info MUST describe src as seen by
        a stat call that does not follow symlinks.
        """
        if to_skip.excludes(src, info):
            logger.debug("Skipping %s", src)
            return

        if info.is_symlink:
            self._copy_symlink(src, dest)
        elif info.is_dir:
            self._copy_directory(src, dest, to_skip, info)
        else:
            self._copy_file(src, dest, info)

    def _copy_file(self, src: str, dest: str, info: EntryInfo) -> None:
        """Copy a single file's contents and permission bits, creating parent directories."""
        os.makedirs(os.path.dirname(dest) or os.curdir, PARENT_DIRECTORY_MODE, exist_ok=True)

        slot = FirstErrorSlot()
        dest_file = open(dest, "wb")
        try:
            with slot.capture():
                os.chmod(dest, info.mode)
                src_file = open(src, "rb")
                try:
                    with slot.capture():
                        shutil.copyfileobj(src_file, dest_file)
                finally:
                    with slot.capture():
                        src_file.close()
        finally:
            with slot.capture():
                dest_file.close()
        slot.raise_if_set()
        logger.debug("Copied file %s (mode %o)", dest, info.mode)

    def _copy_directory(self, src: str, dest: str, to_skip: SkipSet, info: EntryInfo) -> None:
        """Create dest and copy the children of src into it, then restore the source mode."""
        original_mode = info.mode

        os.makedirs(dest, TEMPORARY_DIRECTORY_MODE, exist_ok=True)

        slot = FirstErrorSlot()
        try:
            with slot.capture():
                with os.scandir(src) as it:
                    contents = sorted((EntryInfo.from_dir_entry(entry) for entry in it), key=lambda e: e.name)

                for content in contents:
                    # Any error stops the remaining siblings from being copied
                    self._dispatch(
                        os.path.join(src, content.name), os.path.join(dest, content.name), to_skip, content
                    )
        finally:
            with slot.capture():
                os.chmod(dest, original_mode)
        slot.raise_if_set()
        logger.debug("Copied directory %s (mode %o)", dest, original_mode)

    def _copy_symlink(self, src: str, dest: str) -> None:
        """Apply the symlink policy to the link at src."""
        action = self.options.symlink_action(src)
        logger.debug("Symlink %s handled as %s", src, getattr(action, "value", action))

        if action == SymlinkAction.SHALLOW:
            self._copy_link(src, dest)
        elif action == SymlinkAction.DEEP:
            target = os.readlink(src)
            if not os.path.isabs(target):
                target = os.path.join(os.path.dirname(src), target)
            info = EntryInfo.from_path(target)
            self._dispatch(target, dest, SkipSet.empty(), info)
        # SKIP and any unrecognized action leave the link out

    def _copy_link(self, src: str, dest: str) -> None:
        """Recreate the link at src as dest, pointing at the identical target string.

        A symlink already at dest is replaced, so copying the same tree twice succeeds.
        Any other entry in the way is left alone and the error is raised.
        """
        target = os.readlink(src)
        if os.path.islink(dest):
            if os.readlink(dest) == target:
                return
            os.remove(dest)
        os.symlink(target, dest)
        logger.debug("Linked %s -> %s", dest, target)
