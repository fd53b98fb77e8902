"""Keyword count application package."""

from .config import load_config
from .run import main

__all__ = [
    "load_config",
    "main",
]
