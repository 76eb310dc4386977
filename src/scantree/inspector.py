"""Filesystem metadata lookup for a single entry."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass

from scantree.modes import file_type_char, permission_triplets


class StatError(Exception):
    """Metadata for one entry could not be read.

    Recoverable: the walker reports it as a warning and moves on to the
    next entry. Not a ``ScantreeError``, so it is never fatal.

    Attributes:
        path: Path that failed.
        reason: Operating system error text.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'stat() failed for "{path}": {reason}')
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class FileMetadata:
    """Metadata needed to classify and display one entry.

    Attributes:
        mode: Raw ``st_mode`` bits.
        nlink: Hard-link count.
        size: Size in bytes.
        mtime: Last modification time, seconds since the epoch.
    """

    mode: int
    nlink: int
    size: int
    mtime: float

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def type_char(self) -> str:
        return file_type_char(self.mode)

    @property
    def permission_triplets(self) -> tuple[str, str, str]:
        return permission_triplets(self.mode)


def inspect(path: str) -> FileMetadata:
    """Query metadata for ``path``, following symbolic links.

    Args:
        path: Entry path.

    Returns:
        FileMetadata: Mode, link count, size and mtime.

    Raises:
        StatError: If the entry vanished, is a dangling link, or cannot
            be read.
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        raise StatError(path, exc.strerror or str(exc)) from exc
    return FileMetadata(
        mode=st.st_mode,
        nlink=st.st_nlink,
        size=st.st_size,
        mtime=st.st_mtime,
    )
