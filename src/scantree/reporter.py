"""Output formatting: bare paths or ``ls -l`` style lines."""

from __future__ import annotations

import sys
import time
from typing import Final, TextIO

from scantree.inspector import FileMetadata
from scantree.modes import format_mode

MONTHS: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def group_digits(value: int) -> str:
    """Return ``value`` with comma-separated groups of three digits.

    Args:
        value: Non-negative integer, typically a file size.

    Returns:
        str: For example ``"1,234,567"`` for ``1234567``.
    """
    return f"{value:,}"


def format_date(mtime: float) -> str:
    """Render a timestamp in local time as ``"Sep 21, 2019 08:05:09"``.

    The month table is fixed so output does not depend on the locale.

    Args:
        mtime: Seconds since the epoch.

    Returns:
        str: Formatted date.
    """
    t = time.localtime(mtime)
    return (
        f"{MONTHS[t.tm_mon - 1]} {t.tm_mday:2d}, {t.tm_year} "
        f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d}"
    )


def format_long_line(path: str, metadata: FileMetadata) -> str:
    """Build one long-format line, without the trailing newline.

    Layout: mode, link count (width 4), grouped size (width 12),
    modification date, path.
    """
    size = group_digits(metadata.size)
    return (
        f"{format_mode(metadata.mode)} {metadata.nlink:4d} {size:>12} "
        f"{format_date(metadata.mtime)} {path}"
    )


class Reporter:
    """Write matches to an output stream and warnings to an error stream.

    Args:
        out: Stream for match lines. Defaults to ``sys.stdout``.
        err: Stream for warnings. Defaults to ``sys.stderr``.
    """

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr

    def report(
        self,
        path: str,
        metadata: FileMetadata | None = None,
        long_format: bool = False,
    ) -> None:
        """Write one matching entry.

        Args:
            path: Entry path as built by the walker.
            metadata: Entry metadata; required for the long format.
            long_format: Write an ``ls -l`` style line instead of the
                bare path. Falls back to the bare path when metadata
                is absent.
        """
        if long_format and metadata is not None:
            line = format_long_line(path, metadata)
        else:
            line = path
        self._out.write(line + "\n")

    def warn(self, message: str) -> None:
        self._err.write(f"scantree: warning: {message}\n")
