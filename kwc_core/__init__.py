"""
Core shared errors and helpers for keyword counting.
"""

from .errors import (
    KeywordCountError,
    MissingInputError,
    EmptyFileError,
    NotFoundError,
    ScanError,
    ReportError,
)
from .utils import file_base_name, load_structured_text

__all__ = [
    "KeywordCountError",
    "MissingInputError",
    "EmptyFileError",
    "NotFoundError",
    "ScanError",
    "ReportError",
    "file_base_name",
    "load_structured_text",
]
