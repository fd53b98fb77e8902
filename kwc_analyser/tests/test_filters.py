"""
Tests for kwc_analyser line filters
"""

import shutil
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from kwc_analyser.filters import (
    GrepLineFilter,
    RegexLineFilter,
    StaticLineFilter,
    create_line_filter,
    longest_first,
    split_alternatives,
)
from kwc_core.errors import ScanError


def _completed(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestGrepLineFilter:
    """Test GrepLineFilter"""

    def test_command_exact_match(self):
        """Case-sensitive searches use -Eo"""
        command = GrepLineFilter().build_command("Alice", False, Path("foo.txt"))
        assert command == ["grep", "-Eo", "-e", "Alice", "foo.txt"]

    def test_command_ignore_case(self):
        """Case-insensitive searches use -Eio"""
        command = GrepLineFilter().build_command("Alice|Cat", True, Path("foo.txt"))
        assert command == ["grep", "-Eio", "-e", "Alice|Cat", "foo.txt"]

    def test_splits_output_lines(self):
        with patch("kwc_analyser.filters.subprocess.run", return_value=_completed(stdout=b"foo\nbar\n\nfoo\n")) as run:
            lines = GrepLineFilter().filter("foo|bar", False, Path("x.txt"))

        assert lines == ["foo", "bar", "foo"]
        run.assert_called_once()

    def test_no_match_exit_status(self):
        """Exit status 1 means nothing matched"""
        with patch("kwc_analyser.filters.subprocess.run", return_value=_completed(returncode=1)):
            assert GrepLineFilter().filter("foo", False, Path("x.txt")) == []

    def test_error_exit_status(self):
        """Exit status 2 is reported as ScanError"""
        error = _completed(returncode=2, stderr=b"grep: x.txt: No such file or directory")
        with patch("kwc_analyser.filters.subprocess.run", return_value=error):
            with pytest.raises(ScanError) as excinfo:
                GrepLineFilter().filter("foo", False, Path("x.txt"))

        assert "No such file" in str(excinfo.value)
        assert excinfo.value.path == Path("x.txt")

    def test_missing_executable(self):
        with pytest.raises(ScanError):
            GrepLineFilter(executable="definitely-not-a-grep").filter("foo", False, Path("x.txt"))

    @pytest.mark.skipif(shutil.which("grep") is None, reason="grep not available")
    def test_real_grep_multiple_matches_per_line(self, tmp_path):
        """Every occurrence is emitted, including several on one line"""
        path = tmp_path / "sample.txt"
        path.write_text("foo bar foo\nFOO\n")

        assert GrepLineFilter().filter("foo|bar", False, path) == ["foo", "bar", "foo"]
        assert GrepLineFilter().filter("foo", True, path) == ["foo", "foo", "FOO"]


class TestRegexLineFilter:
    """Test RegexLineFilter"""

    def test_matches_in_order(self, tmp_path, regex_filter):
        path = tmp_path / "sample.txt"
        path.write_text("little bunny foo foo\nhopping through the forest\n")

        lines = regex_filter.filter("little|bunny|foo|forest", False, path)
        assert lines == ["little", "bunny", "foo", "foo", "forest"]

    def test_ignore_case(self, tmp_path, regex_filter):
        path = tmp_path / "sample.txt"
        path.write_text("Foo FOO foo\n")

        assert regex_filter.filter("foo", True, path) == ["Foo", "FOO", "foo"]
        assert regex_filter.filter("foo", False, path) == ["foo"]

    def test_missing_file(self, tmp_path, regex_filter):
        with pytest.raises(ScanError):
            regex_filter.filter("foo", False, tmp_path / "missing.txt")

    def test_directory_is_not_a_file(self, tmp_path, regex_filter):
        with pytest.raises(ScanError):
            regex_filter.filter("foo", False, tmp_path)

    def test_longest_alternative_wins(self, tmp_path, regex_filter):
        """A keyword that prefixes another does not shadow the longer one"""
        path = tmp_path / "sample.txt"
        path.write_text("madness and mad\n")

        assert regex_filter.filter("mad|madness", False, path) == ["madness", "mad"]

    @pytest.mark.skipif(shutil.which("grep") is None, reason="grep not available")
    @pytest.mark.parametrize("pattern,case_insensitive", [
        ("mad|madness", False),
        ("Cat|Caterpillar|cat", True),
        ("foo|foobar|bar", False),
    ])
    def test_agrees_with_grep(self, tmp_path, regex_filter, pattern, case_insensitive):
        path = tmp_path / "sample.txt"
        path.write_text("madness is mad\nthe Caterpillar and the Cat\nfoobar foo bar\n")

        expected = GrepLineFilter().filter(pattern, case_insensitive, path)
        assert regex_filter.filter(pattern, case_insensitive, path) == expected

    def test_invalid_pattern(self, tmp_path, regex_filter):
        path = tmp_path / "sample.txt"
        path.write_text("foo\n")

        with pytest.raises(ScanError):
            regex_filter.filter("foo(", False, path)


class TestLongestFirst:
    """Test alternative reordering for the regex filter"""

    def test_split_ignores_nested_bars(self):
        assert split_alternatives(r"a|(b|c)|[|]|d\|e") == ["a", "(b|c)", "[|]", r"d\|e"]

    def test_longer_alternatives_first(self):
        assert longest_first("mad|madness|Cat") == "madness|mad|Cat"

    def test_equal_lengths_keep_order(self):
        assert longest_first("foo|bar|baz") == "foo|bar|baz"


class TestStaticLineFilter:
    """Test StaticLineFilter"""

    def test_returns_canned_output_and_records_calls(self):
        line_filter = StaticLineFilter({"foo.txt": "foo\nbar"})

        assert line_filter.filter("foo|bar", True, Path("dir/foo.txt")) == ["foo", "bar"]
        assert line_filter.filter("foo|bar", True, Path("dir/other.txt")) == []
        assert line_filter.calls[0] == ("foo|bar", True, Path("dir/foo.txt"))


class TestCreateLineFilter:
    """Test create_line_filter"""

    def test_named_filters(self):
        assert isinstance(create_line_filter("grep"), GrepLineFilter)
        assert isinstance(create_line_filter("regex"), RegexLineFilter)

    def test_auto_prefers_grep(self):
        with patch("kwc_analyser.filters.shutil.which", return_value="/usr/bin/grep"):
            assert isinstance(create_line_filter("auto"), GrepLineFilter)

    def test_auto_without_grep(self):
        with patch("kwc_analyser.filters.shutil.which", return_value=None):
            assert isinstance(create_line_filter("auto"), RegexLineFilter)

    def test_unknown_filter(self):
        with pytest.raises(ValueError):
            create_line_filter("awk")
