"""Distance and similarity between sequences and sets of strings.

Both measures treat whole strings as tokens.  Inserting or deleting a token
costs 1.0 and substituting one token by another costs
``cost_substitute(x, y)`` in [0, 2] (see ``levkit.algorithm.costs``).

- Sequence distance: edit distance over the token lists (order matters).
- Set distance: optimal assignment between the token sets (order ignored);
  surplus tokens of the larger side cost 1.0 each.

Both similarities normalize with ``normalize_collection_similarity``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from levkit.algorithm.costs import TokenCost, cost_substitute
from levkit.algorithm.distance import common_prefix_length, common_suffix_length
from levkit.algorithm.matcher import hungarian_match
from levkit.algorithm.normalizer import normalize_collection_similarity
from levkit.symbols import SymbolSequence, ensure_compatible

__all__ = [
    "align_sequences",
    "match_sets",
    "seq_distance",
    "seqratio",
    "set_distance",
    "setratio",
]


def seq_distance(
    a: Sequence[SymbolSequence],
    b: Sequence[SymbolSequence],
    cost: TokenCost = cost_substitute,
) -> float:
    """Edit distance between two token sequences.

    Leading and trailing runs of equal tokens are stripped first; the rest is
    a rolling-row dynamic program.

    Args:
        a:    First token sequence.
        b:    Second token sequence.
        cost: Substitution cost for a token pair.

    Returns:
        Non-negative float, 0.0 iff the sequences are token-wise equal
        (for the default cost).
    """
    ensure_compatible(*a, *b)
    prefix = common_prefix_length(a, b)
    a, b = a[prefix:], b[prefix:]
    suffix = common_suffix_length(a, b)
    a, b = a[: len(a) - suffix], b[: len(b) - suffix]

    if not a:
        return float(len(b))
    if not b:
        return float(len(a))

    row = [float(j) for j in range(len(b) + 1)]
    for i, x in enumerate(a, start=1):
        diagonal = row[0]
        row[0] = float(i)
        for j, y in enumerate(b, start=1):
            value = min(row[j] + 1.0, row[j - 1] + 1.0, diagonal + cost(x, y))
            diagonal = row[j]
            row[j] = value
    return row[-1]


def align_sequences(
    a: Sequence[SymbolSequence],
    b: Sequence[SymbolSequence],
    cost: TokenCost = cost_substitute,
) -> tuple[float, list[tuple[int, int]]]:
    """Sequence distance plus the aligned (kept or substituted) index pairs.

    Builds the full matrix so the alignment can be traced back; prefer
    ``seq_distance`` when only the number is needed.

    Returns:
        ``(distance, pairs)`` with ``pairs`` in increasing index order.
    """
    ensure_compatible(*a, *b)
    n, m = len(a), len(b)
    matrix = np.zeros((n + 1, m + 1), dtype=np.float64)
    matrix[:, 0] = np.arange(n + 1)
    matrix[0, :] = np.arange(m + 1)
    substitution = np.zeros((n, m), dtype=np.float64)

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            substitution[i - 1, j - 1] = cost(a[i - 1], b[j - 1])
            matrix[i, j] = min(
                matrix[i - 1, j] + 1.0,
                matrix[i, j - 1] + 1.0,
                matrix[i - 1, j - 1] + substitution[i - 1, j - 1],
            )

    pairs: list[tuple[int, int]] = []
    i, j = n, m
    while i > 0 and j > 0:
        if matrix[i, j] == matrix[i - 1, j - 1] + substitution[i - 1, j - 1]:
            pairs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif matrix[i, j] == matrix[i - 1, j] + 1.0:
            i -= 1
        else:
            j -= 1
    pairs.reverse()
    return float(matrix[n, m]), pairs


def match_sets(
    a: Sequence[SymbolSequence],
    b: Sequence[SymbolSequence],
    cost: TokenCost = cost_substitute,
) -> tuple[float, list[tuple[int, int]]]:
    """Set distance plus the optimally assigned index pairs.

    Returns:
        ``(distance, pairs)`` with ``pairs`` sorted by the index into ``a``.
    """
    ensure_compatible(*a, *b)
    if not a or not b:
        return float(len(a) + len(b)), []

    matrix = np.array([[cost(x, y) for y in b] for x in a], dtype=np.float64)
    row_ind, col_ind = hungarian_match(matrix)
    matched = float(matrix[row_ind, col_ind].sum())
    distance = matched + abs(len(a) - len(b))
    pairs = [(int(r), int(c)) for r, c in zip(row_ind, col_ind, strict=True)]
    return distance, pairs


def set_distance(
    a: Sequence[SymbolSequence],
    b: Sequence[SymbolSequence],
    cost: TokenCost = cost_substitute,
) -> float:
    """Distance between two token sets (duplicates count, order does not)."""
    distance, _ = match_sets(a, b, cost)
    return distance


def seqratio(
    a: Sequence[SymbolSequence],
    b: Sequence[SymbolSequence],
    cost: TokenCost = cost_substitute,
) -> float:
    """Similarity of two token sequences in [0, 1]."""
    return normalize_collection_similarity(seq_distance(a, b, cost), len(a), len(b))


def setratio(
    a: Sequence[SymbolSequence],
    b: Sequence[SymbolSequence],
    cost: TokenCost = cost_substitute,
) -> float:
    """Similarity of two token sets in [0, 1]."""
    return normalize_collection_similarity(set_distance(a, b, cost), len(a), len(b))
