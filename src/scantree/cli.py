"""CLI entry point for scantree — I/O boundary only."""

from __future__ import annotations

import argparse
import io
import logging
import sys
import time
from typing import NoReturn, TextIO

from scantree import ScantreeError, UsageError
from scantree.matcher import compile_pattern
from scantree.reporter import Reporter
from scantree.walker import WalkOptions, WalkStats, walk

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises :class:`UsageError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``scantree`` command.
    """
    parser = _ArgumentParser(
        prog="scantree",
        description="Recursively scan a directory tree for files whose names match a pattern",
    )
    parser.add_argument(
        "directory",
        help="Directory to scan",
    )
    parser.add_argument(
        "pattern",
        help="Case-insensitive regular expression matched against entry names",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Invoke debugging mode (trace output on stdout)",
    )
    parser.add_argument(
        "-l",
        "--long",
        action="store_true",
        dest="long_format",
        help="List file information in long format",
    )
    return parser


def _attach_debug_handler(stream: TextIO) -> logging.Handler:
    """Route DEBUG records of the ``scantree`` loggers to ``stream``.

    Args:
        stream: Destination stream, normally stdout.

    Returns:
        logging.Handler: The attached handler, to be removed by the caller.
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("scantree")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler


def _detach_debug_handler(handler: logging.Handler) -> None:
    """Remove a handler added by :func:`_attach_debug_handler`."""
    package_logger = logging.getLogger("scantree")
    package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


def _use_surrogateescape(stream: TextIO) -> None:
    """Write undecodable file names back out as their original bytes.

    ``os.scandir`` decodes such names with surrogate escapes; a strict
    stream would raise ``UnicodeEncodeError`` when printing them.
    """
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="surrogateescape")


def _build_options(args: argparse.Namespace) -> WalkOptions:
    """Build walk options from parsed arguments.

    Args:
        args: Parsed CLI namespace.

    Returns:
        WalkOptions: Immutable options for the walk.

    Raises:
        PatternError: If the pattern does not compile.
    """
    matcher = compile_pattern(args.pattern)
    return WalkOptions(
        matcher=matcher,
        long_format=args.long_format,
    )


def _run_with_args(
    args: argparse.Namespace,
    stdout: TextIO,
    stderr: TextIO,
) -> WalkStats:
    """Run the compile/walk pipeline for parsed arguments.

    Args:
        args: Parsed CLI namespace.
        stdout: Stream for matches and debug trace.
        stderr: Stream for warnings.

    Returns:
        WalkStats: Counters for the completed walk.

    Raises:
        ScantreeError: On a bad pattern or a directory that cannot be opened.
    """
    handler = _attach_debug_handler(stdout) if args.debug else None
    try:
        options = _build_options(args)
        reporter = Reporter(out=stdout, err=stderr)
        started = time.perf_counter()
        stats = walk(args.directory, options, reporter)
        elapsed = time.perf_counter() - started
        logger.debug(
            "scanned %d directories, %d matches, %d warnings in %.3f seconds",
            stats.directories,
            stats.matches,
            stats.warnings,
            elapsed,
        )
        return stats
    finally:
        if handler is not None:
            _detach_debug_handler(handler)


def run_scantree(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> WalkStats:
    """Run scantree with provided CLI args, writing matches to ``stdout``.

    This function is the primary test target for CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.
        stdout: Stream for matches. Defaults to ``sys.stdout``.
        stderr: Stream for warnings. Defaults to ``sys.stderr``.

    Returns:
        WalkStats: Counters for the completed walk.

    Raises:
        ScantreeError: On any user-facing validation or I/O error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(
        args,
        stdout if stdout is not None else sys.stdout,
        stderr if stderr is not None else sys.stderr,
    )


def main() -> None:
    """Run the CLI entry point with process arguments.

    Exits with code 0 after ``-h`` or a completed scan, and with code 1
    on usage errors, bad patterns, or directories that cannot be opened.
    """
    _use_surrogateescape(sys.stdout)
    _use_surrogateescape(sys.stderr)
    parser = build_parser()
    try:
        args = parser.parse_args()
        _run_with_args(args, sys.stdout, sys.stderr)
    except UsageError as exc:
        sys.stdout.flush()
        parser.print_usage(sys.stderr)
        sys.stderr.write(f"scantree: {exc}\n")
        sys.exit(1)
    except ScantreeError as exc:
        sys.stdout.flush()
        sys.stderr.write(f"scantree: {exc}\n")
        sys.exit(1)
