"""
Keyword resolution: literal lists or structured keyword files.
"""

import logging
from pathlib import Path
from typing import List

from kwc_core.errors import EmptyFileError, MissingInputError, NotFoundError
from kwc_core.utils import load_structured_text
from .types import DEFAULT_KEY_NAME, KeywordSpec

logger = logging.getLogger(__name__)


def resolve_keywords(keywords_list: KeywordSpec, key_name: str = DEFAULT_KEY_NAME) -> List[str]:
    """
    Resolve the keyword set for a run.

    A literal list is returned as-is. Anything else is treated as the path
    to a JSON (or YAML) file whose ``key_name`` member holds the keywords.

    Args:
        keywords_list: Keyword list or path to a keyword file
        key_name: Name of the keyword array inside the file

    Returns:
        Ordered list of keywords

    Raises:
        MissingInputError: If nothing usable was provided
        EmptyFileError: If the keyword file has no content
        NotFoundError: If the keyword file does not exist or cannot be read
    """
    if not keywords_list:
        raise MissingInputError("Keyword list not provided")

    if isinstance(keywords_list, (list, tuple)):
        return keywords_list

    path = Path(keywords_list)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise NotFoundError(f"Keyword file not found: {path}") from exc
    except OSError as exc:
        raise NotFoundError(f"Cannot read keyword file {path}: {exc}") from exc

    if not text:
        raise EmptyFileError(f"Keyword file is empty: {path}")

    # Parse errors propagate unchanged
    data = load_structured_text(text, path)

    key_name = key_name or DEFAULT_KEY_NAME
    if not isinstance(data, dict) or key_name not in data:
        raise MissingInputError(f"Keyword file {path} has no '{key_name}' entry")

    keywords = data[key_name]
    if not isinstance(keywords, list) or not keywords:
        raise MissingInputError(f"'{key_name}' in {path} is not a non-empty list")

    keywords = [str(k) for k in keywords]
    logger.debug("Loaded %d keywords from %s", len(keywords), path)
    return keywords
