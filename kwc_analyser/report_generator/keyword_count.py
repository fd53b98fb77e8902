"""
Keyword count report generator

Writes the results store as pretty-printed JSON (and optionally CSV).
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

from kwc_core.errors import ReportError
from .base import BaseReportGenerator
from ..store import ResultStore
from ..types import FrequencyMap, ReportConfig

logger = logging.getLogger(__name__)

Results = Union[ResultStore, Dict[str, FrequencyMap]]


def _as_dict(results: Results) -> Dict[str, FrequencyMap]:
    if isinstance(results, ResultStore):
        return results.as_dict()
    return {name: dict(counts) for name, counts in results.items()}


class KeywordCountReportGenerator(BaseReportGenerator):
    """Report generator for keyword count results."""

    def __init__(self, config: ReportConfig):
        super().__init__(config)

    def serialize(self, results: Results) -> str:
        """Render results as JSON indented with ``config.indent`` spaces."""
        return json.dumps(_as_dict(results), indent=self.config.indent, ensure_ascii=False)

    def generate_json(self, results: Results, output_path: Optional[Path] = None) -> Path:
        """Write the full results to the JSON report, replacing previous content."""
        output_path = self.prepare_output_path(output_path or self.output_path)
        try:
            output_path.write_text(self.serialize(results), encoding="utf-8")
        except OSError as exc:
            raise ReportError(f"Cannot write report {output_path}: {exc}", path=output_path) from exc
        logger.debug("Wrote JSON report to %s", output_path)
        return output_path

    def generate_csv(self, results: Results, output_path: Optional[Path] = None) -> Path:
        """Write one row per file and one column per keyword."""
        output_path = self.prepare_output_path(output_path or self.config.csv_path)

        data = _as_dict(results)
        df = pd.DataFrame.from_dict(data, orient="index")
        if data:
            columns = list(next(iter(data.values())).keys())
            df = df.reindex(columns=columns).fillna(0).astype(int)
        df.index.name = "file"
        try:
            df.to_csv(output_path, index_label="file")
        except OSError as exc:
            raise ReportError(f"Cannot write report {output_path}: {exc}", path=output_path) from exc

        logger.debug("Wrote CSV report to %s", output_path)
        return output_path
