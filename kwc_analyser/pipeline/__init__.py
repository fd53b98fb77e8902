"""
Pipeline implementations for keyword counting.
"""

from .base import AbstractPipeline
from .keyword_count import KeywordCountPipeline, analyze

__all__ = [
    "AbstractPipeline",
    "KeywordCountPipeline",
    "analyze",
]
