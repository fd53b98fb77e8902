"""
Keyword count analyser - count keyword occurrences per file
"""

# Pipeline
from .pipeline.base import AbstractPipeline
from .pipeline.keyword_count import KeywordCountPipeline, analyze

# Keyword resolution and matching
from .keywords import resolve_keywords
from .matchers import build_pattern, get_key

# Line filters
from .filters import LineFilter, GrepLineFilter, RegexLineFilter, StaticLineFilter, create_line_filter

# Processing and storage
from .processors import KeywordCountProcessor
from .store import ResultStore

# Reports
from .report_generator import KeywordCountReportGenerator

# Configuration
from .types import KeywordCountConfig, ReportConfig, ScanStats

__all__ = [
    # Pipeline
    "AbstractPipeline",
    "KeywordCountPipeline",
    "analyze",

    # Keywords
    "resolve_keywords",
    "build_pattern",
    "get_key",

    # Line filters
    "LineFilter",
    "GrepLineFilter",
    "RegexLineFilter",
    "StaticLineFilter",
    "create_line_filter",

    # Processing and storage
    "KeywordCountProcessor",
    "ResultStore",

    # Reports
    "KeywordCountReportGenerator",

    # Configuration
    "KeywordCountConfig",
    "ReportConfig",
    "ScanStats",
]
