"""Mode-bit formatting: ``st_mode`` to an ``ls -l`` style string."""

from __future__ import annotations

from typing import Final

# Indexed by the file-type nibble, bits 12-15 of st_mode.
FILE_TYPE_CHARS: Final[str] = ".pc?d?b?-?l?s???"

# Indexed by one 3-bit permission group.
PERMISSION_TRIPLETS: Final[tuple[str, ...]] = (
    "---",
    "--x",
    "-w-",
    "-wx",
    "r--",
    "r-x",
    "rw-",
    "rwx",
)

_STICKY: Final[int] = 0o1
_SETGID: Final[int] = 0o2
_SETUID: Final[int] = 0o4


def file_type_char(mode: int) -> str:
    """Return the single type character for ``mode``.

    Args:
        mode: Raw mode bits as returned by ``os.stat``.

    Returns:
        str: One of ``.pcdb-ls`` or ``?`` for reserved type values.
    """
    return FILE_TYPE_CHARS[(mode & 0o170000) >> 12]


def _overlay(triplet: str, lower: str, upper: str) -> str:
    """Replace the execute slot of ``triplet`` with a special-bit marker."""
    return triplet[:2] + (lower if triplet[2] == "x" else upper)


def permission_triplets(mode: int) -> tuple[str, str, str]:
    """Return owner, group and other permission strings for ``mode``.

    Setuid, setgid and sticky bits replace the execute character of the
    owner, group and other triplet respectively. The replacement is
    lowercase when execute is also set, uppercase otherwise.

    Args:
        mode: Raw mode bits.

    Returns:
        tuple[str, str, str]: Three 3-character permission strings.
    """
    owner = PERMISSION_TRIPLETS[(mode & 0o700) >> 6]
    group = PERMISSION_TRIPLETS[(mode & 0o070) >> 3]
    other = PERMISSION_TRIPLETS[mode & 0o007]

    special = (mode & 0o7000) >> 9
    if special & _STICKY:
        other = _overlay(other, "t", "T")
    if special & _SETUID:
        owner = _overlay(owner, "s", "S")
    if special & _SETGID:
        group = _overlay(group, "s", "S")
    return owner, group, other


def format_mode(mode: int) -> str:
    """Format mode bits as a 10-character string such as ``drwxr-xr-x``.

    Args:
        mode: Raw mode bits. Only the low 16 bits are considered.

    Returns:
        str: Type character followed by the three permission triplets.
    """
    mode &= 0xFFFF
    return file_type_char(mode) + "".join(permission_triplets(mode))
