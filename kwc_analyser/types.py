"""
Data models and configuration for the keyword count analyser.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from decouple import config


DEFAULT_OUTPUT_PATH = Path("target/results.json")
DEFAULT_KEY_NAME = "keywords"
DEFAULT_MAX_WORKERS = config("KWC_MAX_WORKERS", default=8, cast=int)
DEFAULT_LINE_FILTER = config("KWC_LINE_FILTER", default="auto")

# Keyword -> occurrence count for a single file
FrequencyMap = Dict[str, int]

# Either a literal keyword list or a path to a keyword file
KeywordSpec = Union[List[str], str, Path, None]


@dataclass
class ReportConfig:
    """Configuration for report generation."""
    output_path: Path = DEFAULT_OUTPUT_PATH
    formats: List[str] = field(default_factory=lambda: ["json"])
    indent: int = 4

    @property
    def csv_path(self) -> Path:
        return self.output_path.with_suffix(".csv")


@dataclass
class KeywordCountConfig:
    """Configuration for one keyword count run."""
    target: Optional[Path] = None
    keywords_list: KeywordSpec = None
    output_path: Path = DEFAULT_OUTPUT_PATH
    key_name: str = DEFAULT_KEY_NAME
    ignore_case: bool = False

    # Execution options
    max_workers: int = DEFAULT_MAX_WORKERS
    line_filter: str = DEFAULT_LINE_FILTER
    incremental_writes: bool = False
    show_progress: bool = False
    formats: List[str] = field(default_factory=lambda: ["json"])

    def __post_init__(self) -> None:
        self.target = None if self.target in (None, "") else Path(self.target)
        self.output_path = Path(self.output_path or DEFAULT_OUTPUT_PATH)
        self.key_name = self.key_name or DEFAULT_KEY_NAME
        if self.max_workers < 1:
            self.max_workers = 1

    def report_config(self) -> ReportConfig:
        return ReportConfig(output_path=self.output_path, formats=list(self.formats))


@dataclass
class ScanStats:
    """Counters collected while a pipeline runs."""
    total_files: int = 0
    scanned_files: int = 0
    total_matches: int = 0
    report_writes: int = 0
    start_time: Optional[float] = None
    end_time: Optional[float] = None

    @property
    def total_time(self) -> float:
        if self.start_time is None or self.end_time is None:
            return 0.0
        return self.end_time - self.start_time
