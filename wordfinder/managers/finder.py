from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ..config import EngineConfig
from ..dictionary import DictionaryService
from ..matching import build_letter_count, normalize_query, strip_letters
from ..organizer import organize
from ..schemas import DictionaryStatus, FindWordsResult
from .cache import ResultCache
from .evaluator import ChunkEvaluator, ExecutorFactory

logger = logging.getLogger(__name__)


class WordFinder:
    def __init__(self, config: Optional[EngineConfig] = None,
                 executor_factory: Optional[ExecutorFactory] = None):
        self.config = config or EngineConfig()
        self.dictionary = DictionaryService(min_word_length=self.config.min_word_length)
        self.evaluator = ChunkEvaluator(workers=self.config.workers, executor_factory=executor_factory)
        self.cache = ResultCache()

    def load_dictionary(self, source: Union[str, Path, None] = None) -> int:
        """
        Load the word list from a file. On LoadError the engine is left with an
        empty dictionary and keeps answering queries (with no matches).
        """
        source = source or self.config.dictionary_path
        # Cached results describe the previous word list
        self.cache = ResultCache()
        if source is None:
            raise self.dictionary.fail(None, "No dictionary source configured")
        self.dictionary.load_file(source)
        return self.dictionary.size

    def load_words(self, words: Iterable[str]) -> int:
        self.cache = ResultCache()
        self.dictionary.load_words(words)
        return self.dictionary.size

    async def find_words(self, raw: str) -> FindWordsResult:
        key = normalize_query(raw)
        # Validation errors surface before any lookup or computation
        letter_count = build_letter_count(key, self.config.max_input_length)
        letters = strip_letters(key)

        cache = self.cache
        matches = cache.get(key)
        cached = matches is not None
        if matches is None:
            valid = await self.evaluator.evaluate(self.dictionary.words, letter_count)
            matches = cache.put(key, sorted(valid))
            logger.info("Found %s words for %r", len(matches), key)

        groups, total = organize(matches)
        return FindWordsResult(query=key, letters=letters, groups=groups, totalCount=total, cached=cached)

    def status(self) -> DictionaryStatus:
        return DictionaryStatus(
            loaded=self.dictionary.loaded,
            size=self.dictionary.size,
            source=self.dictionary.source,
            error=self.dictionary.last_error,
            cachedQueries=len(self.cache),
            minWordLength=self.config.min_word_length,
            maxInputLength=self.config.max_input_length,
        )

# Singleton instance
finder = WordFinder(EngineConfig.from_env())
