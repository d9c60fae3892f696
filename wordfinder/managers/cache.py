from __future__ import annotations
import logging
import threading
from typing import Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Memo of sorted matches keyed by normalized query.
    Unbounded and never evicted; entries are immutable tuples.
    Two concurrent misses on one key both compute and the last put wins.
    """

    def __init__(self):
        self._entries: Dict[str, Tuple[str, ...]] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Optional[Tuple[str, ...]]:
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
        logger.debug("Cache %s for %r", 'hit' if value is not None else 'miss', key)
        return value

    def put(self, key: str, words: Iterable[str]) -> Tuple[str, ...]:
        value = tuple(words)
        with self._lock:
            self._entries[key] = value
        return value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
