"""
Line filters: isolate keyword matches from raw file content.

A line filter receives an alternation pattern built from the keywords and
returns every matched substring, one entry per occurrence, in file order.
"""

import logging
import re
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from kwc_core.errors import ScanError

logger = logging.getLogger(__name__)

# grep exits with 1 when nothing matched, which is not a failure
GREP_NO_MATCH = 1


class LineFilter(ABC):
    """Abstract interface for line-filtering backends."""

    name = "line_filter"

    @abstractmethod
    def filter(self, pattern: str, case_insensitive: bool, path: Path) -> List[str]:
        """Return the substrings of ``path`` matching ``pattern``.

        Args:
            pattern: Extended regular expression (keyword alternation)
            case_insensitive: Whether matching ignores case
            path: File to search

        Returns:
            One string per match occurrence.

        Raises:
            ScanError: If the file cannot be searched.
        """


class GrepLineFilter(LineFilter):
    """Run ``grep -Eo`` (or ``grep -Eio``) in a subprocess."""

    name = "grep"

    def __init__(self, executable: str = "grep"):
        self.executable = executable

    def build_command(self, pattern: str, case_insensitive: bool, path: Path) -> List[str]:
        flags = "-Eio" if case_insensitive else "-Eo"
        return [self.executable, flags, "-e", pattern, str(path)]

    def filter(self, pattern: str, case_insensitive: bool, path: Path) -> List[str]:
        command = self.build_command(pattern, case_insensitive, path)
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(command, capture_output=True, check=False)
        except OSError as exc:
            raise ScanError(f"Could not run {self.executable}: {exc}", path=path) from exc

        if completed.returncode == GREP_NO_MATCH:
            return []
        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise ScanError(f"grep failed on {path}: {stderr or completed.returncode}", path=path)

        output = completed.stdout.decode("utf-8", errors="replace")
        return [line for line in output.split("\n") if line]


def split_alternatives(pattern: str) -> List[str]:
    """Split ``pattern`` on ``|`` outside groups, brackets and escapes."""
    alternatives = []
    current = []
    depth = 0
    in_brackets = False
    escaped = False
    for char in pattern:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif in_brackets:
            in_brackets = char != "]"
        elif char == "[":
            in_brackets = True
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "|" and depth == 0:
            alternatives.append("".join(current))
            current = []
            continue
        current.append(char)
    alternatives.append("".join(current))
    return alternatives


def longest_first(pattern: str) -> str:
    """Reorder top-level alternatives so longer ones are tried first.

    Python's ``re`` stops at the first alternative that matches while POSIX
    ERE takes the longest one. For literal keywords this ordering makes both
    engines agree (``mad|madness`` matches all of ``madness``).
    """
    alternatives = split_alternatives(pattern)
    return "|".join(sorted(alternatives, key=len, reverse=True))


class RegexLineFilter(LineFilter):
    """In-process equivalent of ``grep -Eo`` using Python's ``re`` module."""

    name = "regex"

    def filter(self, pattern: str, case_insensitive: bool, path: Path) -> List[str]:
        flags = re.IGNORECASE if case_insensitive else 0
        try:
            regex = re.compile(longest_first(pattern), flags)
        except re.error as exc:
            raise ScanError(f"Invalid keyword pattern {pattern!r}: {exc}", path=path) from exc

        matches: List[str] = []
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    for match in regex.finditer(line.rstrip("\n")):
                        if match.group(0):
                            matches.append(match.group(0))
        except OSError as exc:
            raise ScanError(f"Could not read {path}: {exc}", path=path) from exc
        return matches


class StaticLineFilter(LineFilter):
    """Filter returning canned output per file name; used for dry runs and tests."""

    name = "static"

    def __init__(self, outputs: Optional[Dict[str, str]] = None, default: str = ""):
        self.outputs = dict(outputs or {})
        self.default = default
        self.calls: List[tuple] = []

    def filter(self, pattern: str, case_insensitive: bool, path: Path) -> List[str]:
        self.calls.append((pattern, case_insensitive, Path(path)))
        raw = self.outputs.get(Path(path).name, self.default)
        return [line for line in raw.split("\n") if line]


def create_line_filter(name: str = "auto") -> LineFilter:
    """Instantiate a line filter by name.

    Args:
        name: ``"grep"``, ``"regex"`` or ``"auto"`` (grep when it is on PATH)

    Raises:
        ValueError: If the name is unknown.
    """
    if name == "auto":
        name = "grep" if shutil.which("grep") else "regex"
        logger.debug("Selected %s line filter", name)

    if name == "grep":
        return GrepLineFilter()
    if name == "regex":
        return RegexLineFilter()

    raise ValueError(f"Unknown line filter: {name!r}")
