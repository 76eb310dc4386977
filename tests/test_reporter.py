"""Tests for scantree.reporter — output lines and formatting helpers."""

import io
import stat
import time

import pytest

from scantree.inspector import FileMetadata
from scantree.reporter import Reporter, format_date, format_long_line, group_digits


def _local(year: int, month: int, day: int, hour: int, minute: int, second: int) -> float:
    return time.mktime((year, month, day, hour, minute, second, 0, 0, -1))


class TestGroupDigits:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "0"),
            (7, "7"),
            (999, "999"),
            (1000, "1,000"),
            (65536, "65,536"),
            (1234567, "1,234,567"),
            (10**12, "1,000,000,000,000"),
        ],
    )
    def test_grouping(self, value: int, expected: str) -> None:
        assert group_digits(value) == expected


class TestFormatDate:
    def test_layout(self) -> None:
        assert format_date(_local(2019, 9, 21, 8, 5, 9)) == "Sep 21, 2019 08:05:09"

    def test_single_digit_day_is_space_padded(self) -> None:
        assert format_date(_local(2024, 1, 3, 23, 59, 0)) == "Jan  3, 2024 23:59:00"

    def test_month_names_are_fixed_english(self) -> None:
        assert format_date(_local(2020, 12, 31, 0, 0, 0)).startswith("Dec 31, 2020")


class TestFormatLongLine:
    def test_columns(self) -> None:
        mtime = _local(2019, 9, 21, 8, 5, 9)
        metadata = FileMetadata(mode=stat.S_IFREG | 0o644, nlink=1, size=1234567, mtime=mtime)
        assert format_long_line("root/a.log", metadata) == (
            "-rw-r--r--    1    1,234,567 Sep 21, 2019 08:05:09 root/a.log"
        )

    def test_wide_values_are_not_truncated(self) -> None:
        mtime = _local(2019, 9, 21, 8, 5, 9)
        metadata = FileMetadata(
            mode=stat.S_IFDIR | 0o755, nlink=12345, size=10**13, mtime=mtime
        )
        line = format_long_line("big", metadata)
        assert line.startswith("drwxr-xr-x 12345 10,000,000,000,000 Sep 21")
        assert line.endswith(" big")


class TestReporter:
    def _metadata(self) -> FileMetadata:
        return FileMetadata(mode=stat.S_IFREG | 0o600, nlink=2, size=42, mtime=0.0)

    def test_short_format_writes_bare_path(self) -> None:
        out = io.StringIO()
        Reporter(out=out).report("root/a.log", self._metadata())
        assert out.getvalue() == "root/a.log\n"

    def test_long_format(self) -> None:
        out = io.StringIO()
        Reporter(out=out).report("root/a.log", self._metadata(), long_format=True)
        line = out.getvalue()
        assert line.startswith("-rw-------    2           42 ")
        assert line.endswith(" root/a.log\n")

    def test_long_format_without_metadata_falls_back(self) -> None:
        out = io.StringIO()
        Reporter(out=out).report("root/a.log", None, long_format=True)
        assert out.getvalue() == "root/a.log\n"

    def test_warn_goes_to_error_stream(self) -> None:
        out = io.StringIO()
        err = io.StringIO()
        Reporter(out=out, err=err).warn('stat() failed for "x": gone')
        assert out.getvalue() == ""
        assert err.getvalue() == 'scantree: warning: stat() failed for "x": gone\n'

    def test_defaults_to_process_streams(self, capsys: pytest.CaptureFixture[str]) -> None:
        reporter = Reporter()
        reporter.report("a.log")
        reporter.warn("careful")
        captured = capsys.readouterr()
        assert captured.out == "a.log\n"
        assert captured.err == "scantree: warning: careful\n"
