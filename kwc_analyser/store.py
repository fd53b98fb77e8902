"""
Thread-safe results store shared by concurrent file scans.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from .types import FrequencyMap


class ResultStore:
    """Mapping from file base name to that file's frequency map.

    Insertions replace whole entries; two files sharing a base name collide
    and the later write wins.
    """

    def __init__(self):
        self._results: Dict[str, FrequencyMap] = {}
        self._lock = threading.RLock()

    def put(self, name: str, frequency_map: FrequencyMap) -> None:
        with self._lock:
            self._results[name] = frequency_map

    def get(self, name: str) -> Optional[FrequencyMap]:
        with self._lock:
            return self._results.get(name)

    @contextmanager
    def locked(self) -> Iterator[Dict[str, FrequencyMap]]:
        """Hold the store lock and expose the underlying mapping"""
        with self._lock:
            yield self._results

    def as_dict(self) -> Dict[str, FrequencyMap]:
        """Snapshot copy of the current results"""
        with self._lock:
            return {name: dict(counts) for name, counts in self._results.items()}

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._results.keys())

    def clear(self) -> None:
        with self._lock:
            self._results.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._results

    def __getitem__(self, name: str) -> FrequencyMap:
        with self._lock:
            return self._results[name]

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResultStore):
            return self.as_dict() == other.as_dict()
        if isinstance(other, dict):
            return self.as_dict() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ResultStore({self.as_dict()!r})"
