"""
Abstract pipeline base class
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from ..store import ResultStore


class AbstractPipeline(ABC):
    """Abstract base class for all analysis pipelines"""

    @abstractmethod
    def run(self, target: Optional[Path] = None) -> ResultStore:
        """
        Run the pipeline on the given target

        Args:
            target: File or directory to analyze

        Returns:
            ResultStore holding one frequency map per scanned file
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get a human-readable name for this pipeline"""
        pass
