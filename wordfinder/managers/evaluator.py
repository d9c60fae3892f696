from __future__ import annotations
import asyncio
import logging
import os
from concurrent.futures import Executor, ProcessPoolExecutor
from typing import Callable, List, Optional, Sequence, Set

from ..errors import EvaluationError
from ..matching import LetterCount, can_form
from ..schemas import WordCheckRequest

logger = logging.getLogger(__name__)

ExecutorFactory = Callable[[int], Executor]


def split_round_robin(words: Sequence[str], n: int) -> List[List[str]]:
    """Deal words into n chunks, word i going to chunk i % n."""
    chunks: List[List[str]] = [[] for _ in range(n)]
    for i, word in enumerate(words):
        chunks[i % n].append(word)
    return chunks


def process_word_chunk(request: WordCheckRequest) -> List[str]:
    # Top-level so process pools can pickle it
    return [w for w in request.words if can_form(w, request.letterCount)]


def _process_pool(workers: int) -> Executor:
    return ProcessPoolExecutor(max_workers=workers)


def available_cpus() -> int:
    """Processors this process may run on, falling back to the host total."""
    if hasattr(os, 'process_cpu_count'):
        count = os.process_cpu_count()
    elif hasattr(os, 'sched_getaffinity'):
        count = len(os.sched_getaffinity(0))
    else:
        count = os.cpu_count()
    return count or 1


class ChunkEvaluator:
    def __init__(self, workers: Optional[int] = None, executor_factory: Optional[ExecutorFactory] = None):
        self.workers = workers
        self.executor_factory = executor_factory or _process_pool
        self._executor: Optional[Executor] = None
        self._executor_workers: Optional[int] = None

    def worker_count(self, workers: Optional[int] = None) -> int:
        # Not cached: the processor count is read on every call
        n = workers or self.workers or available_cpus()
        return max(1, n)

    def _executor_for(self, n: int) -> Executor:
        # One pool per worker count, replaced when the count changes
        if self._executor is None or self._executor_workers != n:
            self.shutdown(wait=False)
            self._executor = self.executor_factory(n)
            self._executor_workers = n
            logger.debug("Started worker pool with %s workers", n)
        return self._executor

    def shutdown(self, wait: bool = True) -> None:
        executor, self._executor = self._executor, None
        self._executor_workers = None
        if executor is not None:
            executor.shutdown(wait=wait)

    async def evaluate(self, words: Sequence[str], letter_count: LetterCount,
                       workers: Optional[int] = None) -> Set[str]:
        if not words:
            return set()
        n = self.worker_count(workers)
        requests = [
            WordCheckRequest(words=tuple(chunk), letterCount=letter_count)
            for chunk in split_round_robin(words, n)
            if chunk
        ]
        logger.debug("Dispatching %s chunks over %s workers (%s words)", len(requests), n, len(words))

        loop = asyncio.get_running_loop()
        futures: List[asyncio.Future] = []
        try:
            executor = self._executor_for(n)
            for r in requests:
                futures.append(loop.run_in_executor(executor, process_word_chunk, r))
            results = await asyncio.gather(*futures)
        except Exception as exc:
            # No partial results: the whole dictionary must have been scanned
            for f in futures:
                f.cancel()
            if futures:
                await asyncio.gather(*futures, return_exceptions=True)
            # The pool may be broken; the next query starts a fresh one
            self.shutdown(wait=False)
            logger.exception("Chunk evaluation failed")
            raise EvaluationError(f"Word evaluation failed: {exc}") from exc

        valid: Set[str] = set()
        for chunk_result in results:
            valid.update(chunk_result)
        return valid
