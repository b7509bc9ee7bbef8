"""Scalar string metrics: Levenshtein, ratio, Hamming, Jaro and Jaro-Winkler.

All functions accept any symbol sequence (``str``, ``bytes`` or a sequence of
comparable symbols) and never mutate their inputs.
"""

from __future__ import annotations

from levkit.algorithm.config import JaroWinklerConfig
from levkit.algorithm.normalizer import normalize_similarity
from levkit.errors import InvalidArgumentError, LengthMismatchError
from levkit.symbols import SymbolSequence, ensure_compatible

__all__ = [
    "common_prefix_length",
    "common_suffix_length",
    "hamming",
    "jaro",
    "jaro_winkler",
    "levenshtein",
    "ratio",
]


def common_prefix_length(a: SymbolSequence, b: SymbolSequence) -> int:
    """Number of leading symbols shared by ``a`` and ``b``."""
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def common_suffix_length(a: SymbolSequence, b: SymbolSequence) -> int:
    """Number of trailing symbols shared by ``a`` and ``b``."""
    n = min(len(a), len(b))
    i = 0
    while i < n and a[len(a) - 1 - i] == b[len(b) - 1 - i]:
        i += 1
    return i


def levenshtein(a: SymbolSequence, b: SymbolSequence, substitution_weight: int = 1) -> int:
    """Compute the Levenshtein (edit) distance between two sequences.

    Common prefix and suffix are stripped first, then a rolling-row
    Wagner-Fischer program runs with the shorter sequence on the inner loop
    to minimise the row allocation.

    Args:
        a: First sequence.
        b: Second sequence.
        substitution_weight: Cost of a substitution, 1 or 2.  With 2 a
            substitution costs as much as a deletion plus an insertion.

    Returns:
        The minimum total cost of insertions, deletions and substitutions
        turning ``a`` into ``b``.

    Raises:
        InvalidArgumentError: ``substitution_weight`` is not 1 or 2.
    """
    if substitution_weight not in (1, 2):
        msg = f"substitution_weight must be 1 or 2, got {substitution_weight}"
        raise InvalidArgumentError(msg)
    ensure_compatible(a, b)

    prefix = common_prefix_length(a, b)
    if prefix:
        a, b = a[prefix:], b[prefix:]
    suffix = common_suffix_length(a, b)
    if suffix:
        a, b = a[: len(a) - suffix], b[: len(b) - suffix]

    # Empty-sequence edge case: distance equals the length of the other one
    if not a:
        return len(b)
    if not b:
        return len(a)

    # Swap so that `b` is the shorter sequence (inner loop / row allocation)
    if len(a) < len(b):
        a, b = b, a

    prev_row = list(range(len(b) + 1))
    for i, ch_a in enumerate(a):
        curr_row = [i + 1] + [0] * len(b)
        for j, ch_b in enumerate(b):
            insert_cost = curr_row[j] + 1
            delete_cost = prev_row[j + 1] + 1
            replace_cost = prev_row[j] + (0 if ch_a == ch_b else substitution_weight)
            curr_row[j + 1] = min(insert_cost, delete_cost, replace_cost)
        prev_row = curr_row

    return prev_row[len(b)]


def ratio(a: SymbolSequence, b: SymbolSequence) -> float:
    """Similarity in [0, 1] based on the substitution-weight-2 distance.

    ``(len(a) + len(b) - levenshtein(a, b, 2)) / (len(a) + len(b))``; two
    empty sequences have ratio 1.0.
    """
    return normalize_similarity(levenshtein(a, b, 2), len(a), len(b))


def hamming(a: SymbolSequence, b: SymbolSequence) -> int:
    """Count the positions at which two equal-length sequences differ.

    Raises:
        LengthMismatchError: ``len(a) != len(b)``.
    """
    ensure_compatible(a, b)
    if len(a) != len(b):
        msg = f"hamming requires equal lengths, got {len(a)} and {len(b)}"
        raise LengthMismatchError(msg)
    return sum(1 for x, y in zip(a, b, strict=True) if x != y)


def jaro(a: SymbolSequence, b: SymbolSequence) -> float:
    """Jaro similarity, intended for short strings such as personal names.

    Symbols match when equal and no further apart than
    ``max(len(a), len(b)) // 2 - 1`` positions; each symbol of ``b`` is
    consumed by the earliest symbol of ``a`` it can match.  Half the number of
    matched symbols that appear in a different order counts as transpositions.

    Returns:
        Float in [0.0, 1.0]; 0.0 when nothing matches, 1.0 for identical
        sequences (including two empty ones).
    """
    ensure_compatible(a, b)
    len_a, len_b = len(a), len(b)
    if len_a == 0 and len_b == 0:
        return 1.0
    if len_a == 0 or len_b == 0:
        return 0.0

    window = max(0, max(len_a, len_b) // 2 - 1)
    matched_a = [False] * len_a
    matched_b = [False] * len_b
    matches = 0
    for i in range(len_a):
        lo = max(0, i - window)
        hi = min(len_b, i + window + 1)
        for j in range(lo, hi):
            if not matched_b[j] and a[i] == b[j]:
                matched_a[i] = matched_b[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    out_of_order = 0
    j = 0
    for i in range(len_a):
        if not matched_a[i]:
            continue
        while not matched_b[j]:
            j += 1
        if a[i] != b[j]:
            out_of_order += 1
        j += 1

    m = float(matches)
    transpositions = out_of_order / 2.0
    return (m / len_a + m / len_b + (m - transpositions) / m) / 3.0


def jaro_winkler(
    a: SymbolSequence,
    b: SymbolSequence,
    prefix_weight: float = 0.1,
    config: JaroWinklerConfig | None = None,
) -> float:
    """Jaro-Winkler similarity: Jaro boosted by the common prefix.

    ``jaro + l * prefix_weight * (1 - jaro)`` with ``l`` the common prefix
    length capped at ``config.max_prefix`` (4 by default).  Weights large
    enough to push the boost past the remaining gap saturate at 1.0.

    Args:
        a: First sequence.
        b: Second sequence.
        prefix_weight: Boost per prefix symbol.  Ignored when ``config`` is
            given, but still checked.
        config: Full parameter set.  Defaults to
            ``JaroWinklerConfig(prefix_weight=prefix_weight)``.

    Raises:
        InvalidArgumentError: ``prefix_weight`` is negative.
    """
    if prefix_weight < 0.0:
        msg = f"prefix_weight must be >= 0.0, got {prefix_weight}"
        raise InvalidArgumentError(msg)
    if config is None:
        config = JaroWinklerConfig(prefix_weight=prefix_weight)
    similarity = jaro(a, b)
    prefix = min(config.max_prefix, common_prefix_length(a, b))
    similarity += prefix * config.prefix_weight * (1.0 - similarity)
    return min(1.0, similarity)
