"""TokenCostCache: LRU-backed memo of token substitution costs.

Sequence and set distance price every token pair, and real token lists
repeat tokens a lot.  The cache wraps a cost function and stores each pair's
cost once.  The cost is symmetric, so ``(x, y)`` and ``(y, x)`` share an
entry.  Tokens that are lists are keyed by their tuple form.  LRU eviction
is silent when ``max_size`` is exceeded.

Each ``TokenCostCache`` instance owns its own ``LRUCache``; there is no
class-level shared state.

Example::

    from levkit.cache import TokenCostCache

    cache = TokenCostCache(max_size=256)
    cache("spam", "spa")     # computed
    cache("spa", "spam")     # served from memory
"""

from __future__ import annotations

from collections.abc import Hashable

from cachetools import LRUCache

from levkit.algorithm.costs import TokenCost, cost_substitute
from levkit.errors import InvalidArgumentError
from levkit.symbols import SymbolSequence

__all__ = ["TokenCostCache"]


def _key(token: SymbolSequence) -> Hashable:
    # lists of symbols are valid tokens but cannot key a dict
    return token if isinstance(token, Hashable) else tuple(token)


class TokenCostCache:
    """Callable LRU memo around a symmetric token cost function.

    Args:
        cost: Cost function to memoize.  Defaults to ``cost_substitute``.
        max_size: Maximum number of token pairs held in memory.  Defaults to
            1024.
    """

    def __init__(self, cost: TokenCost = cost_substitute, max_size: int = 1024) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise InvalidArgumentError(msg)
        self._cost = cost
        self._cache: LRUCache[tuple[Hashable, Hashable], float] = LRUCache(
            maxsize=max_size
        )
        self.hits = 0
        self.misses = 0

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def __call__(self, x: SymbolSequence, y: SymbolSequence) -> float:
        key_x, key_y = _key(x), _key(y)
        key = (key_x, key_y) if (key_x, key_y) in self._cache else (key_y, key_x)
        value = self._cache.get(key)
        if value is not None:
            self.hits += 1
            return value
        self.misses += 1
        value = self._cost(x, y)
        self._cache[(key_x, key_y)] = value
        return value

    def clear(self) -> None:
        """Drop every cached pair and reset the hit/miss counters."""
        self._cache.clear()
        self.hits = 0
        self.misses = 0
