"""Token cost functions for sequence and set distance.

Tokens are whole strings; the distance between two token lists is an edit
distance whose unit operations work on tokens:

- cost_insert / cost_delete: unit cost (1.0) for inserting/deleting a token.
- cost_substitute: normalized double-weighted Levenshtein distance,
  ``2 * lev2(x, y) / (len(x) + len(y))``, i.e. ``2 * (1 - ratio(x, y))``.
  Ranges over [0, 2], so substituting two unrelated tokens costs exactly a
  deletion plus an insertion.
"""

from __future__ import annotations

from collections.abc import Callable

from levkit.algorithm.distance import levenshtein
from levkit.symbols import SymbolSequence

__all__ = ["TokenCost", "cost_delete", "cost_insert", "cost_substitute"]

TokenCost = Callable[[SymbolSequence, SymbolSequence], float]


def cost_insert(token: SymbolSequence) -> float:
    """Unit cost for inserting a token."""
    return 1.0


def cost_delete(token: SymbolSequence) -> float:
    """Unit cost for deleting a token."""
    return 1.0


def cost_substitute(x: SymbolSequence, y: SymbolSequence) -> float:
    """Cost of substituting token ``x`` by token ``y``.

    Returns:
        Float in [0.0, 2.0]: 0.0 for equal tokens (including two empty
        ones), 2.0 for tokens sharing nothing.
    """
    total = len(x) + len(y)
    if total == 0:
        return 0.0
    return 2.0 * levenshtein(x, y, substitution_weight=2) / total
