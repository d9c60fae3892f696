from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .errors import LoadError

logger = logging.getLogger(__name__)

# Word list service. The list is loaded once at startup and replaced wholesale on reload,
# never mutated in place, so every worker can share it read-only.

MIN_WORD_LENGTH = 3

_WORD_RE = re.compile(r'^[a-z]+$')


class DictionaryService:
    def __init__(self, min_word_length: int = MIN_WORD_LENGTH):
        self.min_word_length = min_word_length
        self._words: Tuple[str, ...] = ()
        self.source: Optional[str] = None
        self.last_error: Optional[str] = None

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def size(self) -> int:
        return len(self._words)

    @property
    def loaded(self) -> bool:
        return self.source is not None and self.last_error is None

    def __len__(self) -> int:
        return len(self._words)

    def normalize(self, raw: str) -> Optional[str]:
        w = raw.strip().lower()
        if len(w) < self.min_word_length:
            return None
        # Only pure a-z words can ever be formed from a letter multiset
        if not _WORD_RE.match(w):
            return None
        return w

    def load_words(self, words: Iterable[str], source: str = '<memory>') -> Tuple[str, ...]:
        kept = []
        for raw in words:
            w = self.normalize(raw)
            if w is not None:
                kept.append(w)
        self._words = tuple(kept)
        self.source = source
        self.last_error = None
        logger.info("Loaded %s words from %s", len(self._words), source)
        return self._words

    def load_text(self, text: str, source: str = '<text>') -> Tuple[str, ...]:
        return self.load_words(text.split('\n'), source=source)

    def load_file(self, path: Union[str, Path]) -> Tuple[str, ...]:
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise self.fail(str(path), f"Failed to load dictionary from {path}: {exc}") from exc
        return self.load_text(text, source=str(path))

    def fail(self, source: Optional[str], message: str) -> LoadError:
        """Drop to an empty dictionary and build the error for the caller to raise."""
        self._words = ()
        self.source = source
        self.last_error = message
        logger.warning("%s", message)
        return LoadError(message)
