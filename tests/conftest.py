"""Shared fixtures for scantree tests."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from scantree.matcher import compile_pattern
from scantree.reporter import Reporter
from scantree.walker import WalkOptions, WalkStats, walk


@pytest.fixture
def log_tree(tmp_path: Path) -> Path:
    """Create the basic two-level tree.

    Structure::

        root/
        ├── a.log
        └── sub/
            └── b.log
    """
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "a.log").write_text("a")
    (root / "sub" / "b.log").write_text("b")
    return root


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a wider test directory tree.

    Structure::

        root/
        ├── README.md
        ├── docs/
        │   └── Report.TXT
        ├── src/
        │   ├── api/
        │   │   ├── auth.py
        │   │   └── report.py
        │   └── main.py
        └── zeta.py
    """
    root = tmp_path / "root"
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "Report.TXT").write_text("report")
    (root / "src" / "api").mkdir(parents=True)
    (root / "src" / "api" / "auth.py").write_text("auth")
    (root / "src" / "api" / "report.py").write_text("report")
    (root / "src" / "main.py").write_text("main")
    (root / "README.md").write_text("readme")
    (root / "zeta.py").write_text("zeta")
    return root


class WalkResult:
    """Captured output of one walk."""

    def __init__(self, out: str, err: str, stats: WalkStats) -> None:
        self.out = out
        self.err = err
        self.stats = stats

    @property
    def lines(self) -> list[str]:
        return self.out.splitlines()


def run_walk(
    directory: str | Path,
    pattern: str,
    long_format: bool = False,
) -> WalkResult:
    """Walk ``directory`` into in-memory streams.

    Args:
        directory: Start directory.
        pattern: Expression to match names against.
        long_format: Whether to report in long format.

    Returns:
        WalkResult: Captured stdout, stderr and stats.
    """
    out = io.StringIO()
    err = io.StringIO()
    options = WalkOptions(matcher=compile_pattern(pattern), long_format=long_format)
    stats = walk(str(directory), options, Reporter(out=out, err=err))
    return WalkResult(out.getvalue(), err.getvalue(), stats)
