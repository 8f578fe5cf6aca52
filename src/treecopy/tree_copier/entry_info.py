"""Entry descriptor holding the kind and permission bits of a filesystem entry."""

import os
import stat
from typing import Any

from treecopy.types import FileType, PathType


class EntryInfo:
    """Kind, permission bits and name of a filesystem entry.

    An EntryInfo is obtained exactly once per entry with a stat call that does not
    follow symbolic links, and is then handed to the dispatcher so recursive calls
    never have to stat the same path again.

    Attributes:
        name (str): The base name of the entry.
        kind (FileType): Whether the entry is a regular file, a directory or a symlink.
        mode (int): The permission bits of the entry (including setuid, setgid and sticky).

    Example:
        >>> import stat
        >>> info = EntryInfo("file.txt", FileType.FILE, 0o644)
        >>> info.is_file
        True
        >>> oct(info.mode)
        '0o644'
    """

    def __init__(self, name: str, kind: FileType, mode: int):
        """Initialize an EntryInfo.

        Args:
            name: The base name of the entry.
            kind: The kind of the entry.
            mode: The permission bits of the entry.
        """
        self.name = name
        self.kind = kind
        self.mode = mode

    @classmethod
    def from_stat(cls, name: str, stat_result: os.stat_result) -> "EntryInfo":
        """Build an EntryInfo from the result of a non-following stat call.

        Args:
            name: The base name of the entry.
            stat_result: The result of os.lstat() or DirEntry.stat(follow_symlinks=False).

        Returns:
            The corresponding EntryInfo.
        """
        st_mode = stat_result.st_mode
        if stat.S_ISLNK(st_mode):
            kind = FileType.SYMLINK
        elif stat.S_ISDIR(st_mode):
            kind = FileType.DIRECTORY
        else:
            kind = FileType.FILE
        return cls(name, kind, stat.S_IMODE(st_mode))

    @classmethod
    def from_path(cls, path: PathType) -> "EntryInfo":
        """Stat a path without following symlinks and describe it.

        Args:
            path: Path of the entry to describe.

        Returns:
            The EntryInfo of the entry itself (a symlink is described as a symlink).

        Raises:
            FileNotFoundError: If the path does not exist.
            PermissionError: If the path cannot be stat'd.
        """
        path = os.fspath(path)
        return cls.from_stat(os.path.basename(path), os.lstat(path))

    @classmethod
    def from_dir_entry(cls, entry: "os.DirEntry[str]") -> "EntryInfo":
        """Describe an entry returned by os.scandir() without following symlinks."""
        return cls.from_stat(entry.name, entry.stat(follow_symlinks=False))

    @property
    def is_symlink(self) -> bool:
        return self.kind is FileType.SYMLINK

    @property
    def is_dir(self) -> bool:
        return self.kind is FileType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is FileType.FILE

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, EntryInfo):
            return False
        return self.name == other.name and self.kind == other.kind and self.mode == other.mode

    def __hash__(self) -> int:
        return hash((self.name, self.kind, self.mode))

    def __repr__(self) -> str:
        return f"EntryInfo(name={self.name!r}, kind={self.kind.value}, mode={oct(self.mode)})"
