"""Background analysis with superseding submissions.

An input change (new legs, new spot) calls submit() again; the previous
computation is cancelled if it has not started, and discarded if it
finishes after being superseded.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from ..models.analysis import AnalysisResult
from ..models.strategy import Strategy
from .analyzer import AnalysisEngine

logger = logging.getLogger("options_analyzer.runner")


class BackgroundAnalyzer:
    """Run analyses off the caller's thread, delivering only the latest.

    The worker pool is started by the first submit() and its threads
    stay alive until shutdown() is called, or the analyzer is used as a
    context manager.
    """

    def __init__(self, engine: AnalysisEngine | None = None, max_workers: int = 1):
        self.engine = engine or AnalysisEngine()
        self.max_workers = max_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        self._lock = threading.Lock()
        self._generation = 0
        self._pending: Optional[Future] = None
        self._latest: Optional[AnalysisResult] = None
        self._closed = False

    def submit(
        self,
        strategy: Strategy,
        rng_seed: int | None = None,
        on_result: Callable[[AnalysisResult], None] | None = None,
    ) -> Future:
        """Schedule an analysis, superseding any earlier submission.

        Args:
            strategy: Strategy to analyze
            rng_seed: Monte Carlo seed
            on_result: Called with the result only if it is still current

        Returns:
            Future for this submission's AnalysisResult
        """
        with self._lock:
            if self._closed:
                raise RuntimeError("BackgroundAnalyzer has been shut down")
            self._generation += 1
            generation = self._generation
            if self._pending is not None and self._pending.cancel():
                logger.debug("Cancelled superseded analysis before it started")
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="analysis")
            future = self._executor.submit(self.engine.analyze, strategy, rng_seed)
            self._pending = future

        future.add_done_callback(lambda f: self._deliver(generation, f, on_result))
        return future

    def _deliver(
        self,
        generation: int,
        future: Future,
        on_result: Callable[[AnalysisResult], None] | None,
    ) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error("Analysis failed: %s", error)
            return

        result = future.result()
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale analysis (generation %d < %d)", generation, self._generation)
                return
            self._latest = result

        if on_result is not None:
            on_result(result)

    @property
    def latest(self) -> Optional[AnalysisResult]:
        """Most recent result that was current when it finished."""
        with self._lock:
            return self._latest

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work and release the worker threads."""
        with self._lock:
            self._closed = True
            executor = self._executor
        if executor is not None:
            executor.shutdown(wait=wait)

    def __enter__(self) -> "BackgroundAnalyzer":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()
