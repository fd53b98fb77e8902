"""
Utility functions for kwc_core
"""

import json
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

YAML_SUFFIXES = (".yaml", ".yml")


def file_base_name(path: PathLike) -> str:
    """Return the file name of *path* without directory and last extension.

    ``path/to/myFile.txt`` becomes ``myFile``.
    """
    return Path(path).stem


def load_structured_text(text: str, source: PathLike = "") -> Any:
    """
    Parse structured text, choosing the parser from the source suffix

    Args:
        text: Raw file content
        source: Path the content was read from; ``.yaml``/``.yml`` selects YAML

    Returns:
        The parsed document
    """
    if str(source).lower().endswith(YAML_SUFFIXES):
        return yaml.safe_load(text)
    return json.loads(text)
