"""
File processors for the keyword count analyser
"""

from pathlib import Path
from typing import Iterable, List, Optional

from .filters import LineFilter, create_line_filter
from .matchers import build_pattern, get_key, new_frequency_map
from .types import FrequencyMap


class KeywordCountProcessor:
    """Count keyword occurrences in a single file.

    The configured line filter isolates matched substrings; each one is
    attributed to a keyword and counted. The resulting frequency map always
    holds every keyword, including those that never matched.
    """

    def __init__(self, keywords: List[str], ignore_case: bool = False,
                 line_filter: Optional[LineFilter] = None, name: str = None):
        """
        Initialize keyword count processor

        Args:
            keywords: Keywords to count
            ignore_case: Whether matching ignores case
            line_filter: Backend isolating matches (defaults to ``create_line_filter()``)
            name: Optional name for this processor
        """
        self.keywords = keywords
        self.ignore_case = ignore_case
        self.line_filter = line_filter or create_line_filter()
        self.name = name or "keyword_count"
        self.pattern = build_pattern(keywords)

    def count_matches(self, lines: Iterable[str]) -> FrequencyMap:
        """Build a frequency map from matched substrings, one per line"""
        frequency_map = new_frequency_map(self.keywords)

        for line in lines:
            if not line:
                continue
            key = get_key(line, frequency_map, self.ignore_case)
            # Keys outside the keyword set only appear for patterns with metacharacters
            if key is not None and key in frequency_map:
                frequency_map[key] += 1

        return frequency_map

    def process(self, path: Path) -> FrequencyMap:
        """Scan ``path`` and return its frequency map (raises ScanError on failure)"""
        lines = self.line_filter.filter(self.pattern, self.ignore_case, Path(path))
        return self.count_matches(lines)
