from concurrent.futures import ThreadPoolExecutor

import pytest

from wordfinder.config import EngineConfig
from wordfinder.managers.finder import WordFinder

WORDS = ["cat", "act", "at", "tack", "tact"]


def thread_pool(workers):
    return ThreadPoolExecutor(max_workers=workers)


def write_wordlist(path, words):
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def wordlist(tmp_path):
    return write_wordlist(tmp_path / "words.txt", WORDS)


@pytest.fixture
def finder():
    f = WordFinder(EngineConfig(workers=3), executor_factory=thread_pool)
    f.load_words(WORDS)
    yield f
    f.evaluator.shutdown()
