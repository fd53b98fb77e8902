"""
Report generators for keyword count results.
"""

from .base import BaseReportGenerator
from .keyword_count import KeywordCountReportGenerator

__all__ = [
    "BaseReportGenerator",
    "KeywordCountReportGenerator",
]
