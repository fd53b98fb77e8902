"""
Configuration helpers for the keyword count application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from kwc_analyser.types import (
    DEFAULT_KEY_NAME,
    DEFAULT_LINE_FILTER,
    DEFAULT_MAX_WORKERS,
    DEFAULT_OUTPUT_PATH,
    KeywordCountConfig,
)

SUPPORTED_FORMATS = ("json", "csv")


def _as_path(value: Optional[Any]) -> Optional[Path]:
    if value in (None, ""):
        return None
    return Path(value)


def _as_keywords(data: Dict[str, Any]) -> Any:
    """Inline ``keywords`` list wins over a ``keywords_file`` reference."""
    inline = data.get("keywords")
    if inline:
        if not isinstance(inline, list):
            raise ValueError("config field 'keywords' must be a list")
        return [str(k) for k in inline if str(k).strip()]
    return _as_path(data.get("keywords_file"))


def _as_formats(value: Any) -> List[str]:
    if not value:
        return ["json"]
    if isinstance(value, str):
        value = [value]
    formats = [str(v).strip().lower() for v in value]
    unknown = [f for f in formats if f not in SUPPORTED_FORMATS]
    if unknown:
        raise ValueError(f"unsupported report format(s): {', '.join(unknown)}")
    return formats


def load_config(path: Path) -> KeywordCountConfig:
    """Load a run configuration from a YAML file."""
    payload = yaml.safe_load(path.read_text(encoding="utf-8")) if path.exists() else {}
    data: Dict[str, Any] = payload or {}
    if not isinstance(data, dict):
        raise ValueError(f"config {path} must contain a mapping")

    cfg = KeywordCountConfig(
        target=_as_path(data.get("target")),
        keywords_list=_as_keywords(data),
        output_path=_as_path(data.get("output_path")) or DEFAULT_OUTPUT_PATH,
        key_name=str(data.get("key_name") or DEFAULT_KEY_NAME),
        ignore_case=bool(data.get("ignore_case", False)),
        line_filter=str(data.get("line_filter") or DEFAULT_LINE_FILTER),
        incremental_writes=bool(data.get("incremental_writes", False)),
        show_progress=bool(data.get("show_progress", False)),
        formats=_as_formats(data.get("formats")),
    )

    # Execution
    try:
        mw = int(data.get("max_workers", DEFAULT_MAX_WORKERS))
        cfg.max_workers = mw if mw >= 1 else 1
    except (TypeError, ValueError):
        cfg.max_workers = DEFAULT_MAX_WORKERS

    return cfg
