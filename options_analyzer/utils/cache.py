"""Caching for repeated strategy analyses.

Provides LRU caching of AnalysisResult objects. Only seeded analyses are
cached: an unseeded run draws fresh randomness and is recomputed each time.
"""

from typing import Dict, Tuple, Optional
from collections import OrderedDict
import logging

from ..analytics.analyzer import AnalysisEngine
from ..models.analysis import AnalysisResult
from ..models.strategy import Strategy

logger = logging.getLogger("options_analyzer.cache")


class ResultCache:
    """LRU cache in front of an AnalysisEngine."""

    def __init__(self, engine: AnalysisEngine | None = None, maxsize: int = 256):
        """Initialize result cache.

        Args:
            engine: Engine used on cache misses
            maxsize: Maximum number of cached results
        """
        self.engine = engine or AnalysisEngine()
        self._cache: OrderedDict[Tuple[Strategy, int], AnalysisResult] = OrderedDict()
        self.maxsize = maxsize
        self._hits = 0
        self._misses = 0

    def analyze(self, strategy: Strategy, rng_seed: Optional[int] = None) -> AnalysisResult:
        """Get a cached result or compute it.

        Args:
            strategy: Strategy to analyze (frozen, so hashable)
            rng_seed: Monte Carlo seed; unseeded requests bypass the cache

        Returns:
            AnalysisResult (from cache or freshly computed)
        """
        if rng_seed is None:
            return self.engine.analyze(strategy)

        key = (strategy, rng_seed)

        if key in self._cache:
            self._hits += 1
            self._cache.move_to_end(key)
            logger.debug("Cache hit for %r", strategy)
            return self._cache[key]

        self._misses += 1
        logger.debug("Cache miss for %r", strategy)

        result = self.engine.analyze(strategy, rng_seed=rng_seed)

        if len(self._cache) >= self.maxsize:
            self._cache.popitem(last=False)
            logger.debug("Cache full, evicted least recently used entry")

        self._cache[key] = result

        return result

    def clear(self):
        """Clear all cached entries."""
        self._cache.clear()
        logger.info("Result cache cleared")

    def stats(self) -> Dict[str, int | float]:
        """Get cache statistics.

        Returns:
            Dictionary with cache statistics
        """
        total_requests = self._hits + self._misses
        hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0.0

        return {
            'size': len(self._cache),
            'maxsize': self.maxsize,
            'hits': self._hits,
            'misses': self._misses,
            'hit_rate': hit_rate,
        }

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        """String representation of cache stats."""
        stats = self.stats()
        return (
            f"ResultCache(size={stats['size']}/{stats['maxsize']}, "
            f"hits={stats['hits']}, misses={stats['misses']}, "
            f"hit_rate={stats['hit_rate']:.1f}%)"
        )
