"""
Base report generator for keyword count results.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from kwc_core.errors import ReportError
from ..types import ReportConfig


class BaseReportGenerator(ABC):
    """Base class for all report generators."""

    def __init__(self, config: ReportConfig):
        self.config = config
        self.output_path = Path(config.output_path)

    @abstractmethod
    def generate_json(self, results: Any, output_path: Optional[Path] = None) -> Path:
        """Generate JSON report from results."""
        pass

    @abstractmethod
    def generate_csv(self, results: Any, output_path: Optional[Path] = None) -> Path:
        """Generate CSV report from results."""
        pass

    def generate_all(self, results: Any) -> Dict[str, Path]:
        """Generate all configured report formats."""
        report_paths = {}

        if "json" in self.config.formats:
            report_paths['json'] = self.generate_json(results)

        if "csv" in self.config.formats:
            report_paths['csv'] = self.generate_csv(results)

        return report_paths

    def prepare_output_path(self, output_path: Path) -> Path:
        """Create the parent directory and an empty file if they are missing."""
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.touch(exist_ok=True)
        except OSError as exc:
            raise ReportError(f"Cannot create report {output_path}: {exc}", path=output_path) from exc
        return output_path
