"""Recursive two-phase directory walk.

Each directory is processed in two phases. First every entry is
inspected, matching names are reported, and subdirectories are
collected while the ``os.scandir`` handle is open. Then the handle is
closed and the collected subdirectories are walked in order. A
directory's own matches are therefore always written before anything
found beneath it, and only one directory handle is open at any time.

Recursion depth equals tree depth, so very deep trees are bounded by the
interpreter's recursion limit. Symbolic links to directories are
followed without cycle detection.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from scantree import DirectoryOpenError
from scantree.inspector import StatError, inspect
from scantree.matcher import PatternMatcher
from scantree.reporter import Reporter

logger = logging.getLogger(__name__)

_SELF_AND_PARENT = (".", "..")


@dataclass(frozen=True, slots=True)
class WalkOptions:
    """Options fixed for the whole walk.

    Attributes:
        matcher: Matcher applied to every entry's bare name.
        long_format: Whether matches are reported in long format.
    """

    matcher: PatternMatcher
    long_format: bool = False


@dataclass(slots=True)
class WalkStats:
    """Counters accumulated over one walk."""

    directories: int = 0
    matches: int = 0
    warnings: int = 0


def _join(directory: str, name: str) -> str:
    """Build an entry path; entries of ``.`` are reported by bare name."""
    if directory == ".":
        return name
    return f"{directory}/{name}"


class TreeWalker:
    """Walk a directory tree, reporting entries whose names match.

    Args:
        options: Walk options.
        reporter: Destination for matches and warnings.
    """

    def __init__(self, options: WalkOptions, reporter: Reporter) -> None:
        self.options = options
        self.reporter = reporter
        self.stats = WalkStats()

    def walk(self, directory: str) -> None:
        """Walk ``directory`` and everything below it.

        Args:
            directory: Directory path, relative or absolute.

        Raises:
            DirectoryOpenError: If this directory or any directory below
                it cannot be opened. Output written before the failure is
                kept.
        """
        logger.debug("walk(%s)", directory)

        pending: list[str] = []
        try:
            handle = os.scandir(directory)
        except OSError as exc:
            raise DirectoryOpenError(directory, exc.strerror or str(exc)) from exc

        with handle:
            self.stats.directories += 1
            names = [*_SELF_AND_PARENT, *sorted(entry.name for entry in handle)]
            for name in names:
                subdirectory = self._visit(directory, name)
                if subdirectory is not None:
                    pending.append(subdirectory)

        for subdirectory in pending:
            self.walk(subdirectory)

    def _visit(self, directory: str, name: str) -> str | None:
        """Inspect and possibly report one entry.

        Returns:
            str | None: The entry's path when it should be walked later.
        """
        path = _join(directory, name)
        try:
            metadata = inspect(path)
        except StatError as exc:
            self.stats.warnings += 1
            self.reporter.warn(str(exc))
            return None

        special = name in _SELF_AND_PARENT
        if self.options.matcher.matches(name):
            self.stats.matches += 1
            self.reporter.report(path, metadata, self.options.long_format)

        if metadata.is_dir and not special:
            return path
        return None


def walk(directory: str, options: WalkOptions, reporter: Reporter) -> WalkStats:
    """Walk ``directory`` with a fresh :class:`TreeWalker`.

    Args:
        directory: Start directory.
        options: Walk options.
        reporter: Destination for matches and warnings.

    Returns:
        WalkStats: Counters for the completed walk.

    Raises:
        DirectoryOpenError: If any directory in the tree cannot be opened.
    """
    walker = TreeWalker(options, reporter)
    walker.walk(directory)
    return walker.stats
