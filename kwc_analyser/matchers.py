"""
Match selection: attribute a filtered line to one configured keyword.
"""

from typing import Iterable, List, Mapping, Optional

from .types import FrequencyMap


def build_pattern(keywords: Iterable[str]) -> str:
    """Join keywords into an alternation pattern (metacharacters are not escaped)."""
    return "|".join(keywords)


def get_key(word: str, frequency_map: Mapping[str, int], ignore_case: bool = False) -> Optional[str]:
    """
    Get the key in ``frequency_map`` that ``word`` should be counted under.

    The line filter only emits matched substrings, so in case-sensitive mode
    the word already is the key. With ``ignore_case`` the first key whose
    uppercase form equals the word's uppercase form wins.

    Returns:
        The matched key, or None if no key matches
    """
    if not ignore_case:
        return word

    upper = word.upper()
    for key in frequency_map:
        if key.upper() == upper:
            return key
    return None


def new_frequency_map(keywords: List[str]) -> FrequencyMap:
    """Zero-initialised count for every keyword, in keyword order."""
    return {keyword: 0 for keyword in keywords}
