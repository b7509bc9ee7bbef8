"""Generalized median strings: greedy, quick, set median and local improvement.

A generalized median of a set of strings minimises the weighted sum of
Levenshtein distances (SOD) to all of them.  Finding it exactly is NP-hard;
the solvers here trade quality for speed:

- ``greedy_median``: builds the median one symbol at a time, keeping one DP
  row per input string.  Good quality, O(maxlen * |alphabet| * sum(len)).
- ``quick_median``: positional voting over proportionally stretched inputs.
  Somewhere between ``set_median`` and picking a random string, both in
  speed and quality.
- ``set_median``: the best member of the input set (O(n^2) distances).
- ``median_improve``: one pass of single-symbol perturbations; never makes
  the SOD worse.

Weights are multiplicities, not probabilities: giving a string weight 2 is
equivalent to (and cheaper than) listing it twice.  Weight 0 keeps a string
in the bookkeeping without letting it influence the result.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Sequence

import numpy as np

from levkit.algorithm.distance import levenshtein
from levkit.errors import InvalidArgumentError
from levkit.symbols import SymbolSequence, alphabet, ensure_compatible, rebuild

__all__ = [
    "greedy_median",
    "median_improve",
    "quick_median",
    "resolve_weights",
    "set_median",
    "set_median_index",
    "weighted_sod",
]

logger = logging.getLogger(__name__)


def resolve_weights(
    strings: Sequence[SymbolSequence],
    weights: Sequence[float] | np.ndarray | None,
) -> np.ndarray:
    """Validate ``weights`` against ``strings`` and return them as a float vector.

    Args:
        strings: The input strings.
        weights: One non-negative weight per string, or None for uniform 1.0.

    Returns:
        Shape ``(len(strings),)`` float64 array.

    Raises:
        InvalidArgumentError: Wrong number of weights or a negative weight.
    """
    n = len(strings)
    if weights is None:
        return np.ones(n, dtype=np.float64)
    w = np.asarray(weights, dtype=np.float64)
    if w.ndim != 1 or w.shape[0] != n:
        msg = f"expected {n} weights (one per string), got {w.size}"
        raise InvalidArgumentError(msg)
    if np.any(w < 0.0):
        msg = "weights must be non-negative"
        raise InvalidArgumentError(msg)
    return w


def weighted_sod(
    candidate: SymbolSequence,
    strings: Sequence[SymbolSequence],
    weights: Sequence[float] | np.ndarray | None = None,
) -> float:
    """Weighted sum of Levenshtein distances from ``candidate`` to ``strings``."""
    w = resolve_weights(strings, weights)
    distances = np.array([levenshtein(candidate, s) for s in strings], dtype=np.float64)
    return float(distances @ w) if len(strings) else 0.0


def _extend_row(row: list[int], s: SymbolSequence, symbol: Hashable, length: int) -> list[int]:
    """DP row for a candidate prefix of ``length`` symbols ending in ``symbol``.

    ``row`` is the row of the prefix without ``symbol``.
    """
    new_row = [length]
    for k, ch in enumerate(s):
        new_row.append(min(row[k + 1] + 1, new_row[k] + 1, row[k] + (symbol != ch)))
    return new_row


def greedy_median(
    strings: Sequence[SymbolSequence],
    weights: Sequence[float] | np.ndarray | None = None,
) -> SymbolSequence:
    """Find an approximate generalized median with the greedy algorithm.

    The candidate starts empty and grows by one symbol per step.  For each
    alphabet symbol the next DP row against every input is computed; the
    symbol whose rows have the lowest weighted sum of minima wins (first in
    alphabet order on ties).  The weighted sum of final cells is the SOD of
    that prefix.  Growth stops at ``2 * maxlen + 1`` symbols, or as soon as
    the candidate is longer than every input and the SOD rises.  The prefix
    with the lowest SOD (possibly empty) is returned.

    Args:
        strings: Input strings (any symbol sequences of one kind).
        weights: Per-string multiplicities; None means 1.0 each.

    Returns:
        The median, of the same kind as the inputs.  Empty for empty input.
    """
    w = resolve_weights(strings, weights).tolist()
    ensure_compatible(*strings)
    like = strings[0] if strings else None
    symbols = alphabet(strings)
    if not symbols:
        return rebuild([], like)

    rows = [list(range(len(s) + 1)) for s in strings]
    maxlen = max(len(s) for s in strings)
    stoplen = 2 * maxlen + 1
    logger.debug(
        "greedy median: %d strings, %d symbols, stop length %d",
        len(strings),
        len(symbols),
        stoplen,
    )

    median: list[Hashable] = []
    # sods[k] is the SOD of median[:k]; sods[0] belongs to the empty string
    sods = [sum(len(s) * weight for s, weight in zip(strings, w, strict=True))]

    for length in range(1, stoplen + 1):
        best_symbol = symbols[0]
        best_minsum = math.inf
        best_total = 0.0
        for symbol in symbols:
            minsum = 0.0
            total = 0.0
            for s, row, weight in zip(strings, rows, w, strict=True):
                x = low = length
                for k, ch in enumerate(s):
                    x = min(x + 1, row[k] + (symbol != ch), row[k + 1] + 1)
                    if x < low:
                        low = x
                minsum += low * weight
                total += x * weight
            if minsum < best_minsum:
                best_minsum = minsum
                best_symbol = symbol
                best_total = total
        median.append(best_symbol)
        sods.append(best_total)

        if length == stoplen or (length > maxlen and sods[length] > sods[length - 1]):
            break
        rows = [
            _extend_row(row, s, best_symbol, length)
            for s, row in zip(strings, rows, strict=True)
        ]

    best_length = 0
    for length in range(1, len(sods)):
        if sods[length] < sods[best_length]:
            best_length = length
    return rebuild(median[:best_length], like)


def quick_median(
    strings: Sequence[SymbolSequence],
    weights: Sequence[float] | np.ndarray | None = None,
) -> SymbolSequence:
    """Find a very approximate generalized median, but fast.

    The median length is the weighted mean input length (rounded half down).
    Each input is stretched to that length; at output position ``j`` a
    string votes, with its weight, for the symbols covering the slice
    ``[len*j/L, len*(j+1)/L)`` of itself, partially covered symbols in
    proportion to the overlap.  The symbol with most votes wins.

    Returns:
        The median, of the same kind as the inputs.  Empty for empty input
        or when all weights are zero.
    """
    w = resolve_weights(strings, weights).tolist()
    ensure_compatible(*strings)
    like = strings[0] if strings else None

    total_weight = sum(w)
    if total_weight == 0.0:
        return rebuild([], like)
    mean_length = sum(len(s) * weight for s, weight in zip(strings, w, strict=True))
    length = math.floor(mean_length / total_weight + 0.499999)
    if length == 0:
        return rebuild([], like)

    symbols = alphabet(strings)
    median: list[Hashable] = []
    for j in range(length):
        votes = dict.fromkeys(symbols, 0.0)
        for s, weight in zip(strings, w, strict=True):
            n = len(s)
            if n == 0:
                continue
            step = n / length
            start = step * j
            end = start + step
            istart = math.floor(start)
            iend = min(math.ceil(end), n)
            for k in range(istart + 1, iend):
                votes[s[k]] += weight
            votes[s[istart]] += weight * (1 + istart - start)
            votes[s[iend - 1]] -= weight * (iend - end)
        median.append(max(symbols, key=votes.__getitem__))
    return rebuild(median, like)


def set_median_index(
    strings: Sequence[SymbolSequence],
    weights: Sequence[float] | np.ndarray | None = None,
) -> int:
    """Index of the set median: the member with the lowest weighted SOD.

    Ties go to the earliest index.  Returns -1 for empty input.
    """
    w = resolve_weights(strings, weights)
    ensure_compatible(*strings)
    n = len(strings)
    if n == 0:
        return -1

    distances = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(i + 1, n):
            distances[i, j] = distances[j, i] = levenshtein(strings[i], strings[j])

    sods = distances @ w
    index = int(np.argmin(sods))  # first occurrence on ties
    logger.debug("set median: index %d of %d, SOD %.3f", index, n, sods[index])
    return index


def set_median(
    strings: Sequence[SymbolSequence],
    weights: Sequence[float] | np.ndarray | None = None,
) -> SymbolSequence:
    """The member of ``strings`` with the lowest weighted SOD (earliest on ties).

    Empty input has no kind to copy, so the result is then ``""``.
    """
    index = set_median_index(strings, weights)
    if index < 0:
        return ""
    return strings[index]


def _finish_sod(
    rows: list[list[int]],
    suffix: Sequence[Hashable],
    strings: Sequence[SymbolSequence],
    weights: list[float],
) -> float:
    """SOD of (prefix encoded by ``rows``) + ``suffix``."""
    total = 0.0
    for s, row, weight in zip(strings, rows, weights, strict=True):
        current = row
        offset = row[0]
        for i, symbol in enumerate(suffix, start=1):
            current = _extend_row(current, s, symbol, offset + i)
        total += current[-1] * weight
    return total


def median_improve(
    candidate: SymbolSequence,
    strings: Sequence[SymbolSequence],
    weights: Sequence[float] | np.ndarray | None = None,
) -> SymbolSequence:
    """Improve an approximate median with single-symbol perturbations.

    Walks the candidate left to right once.  At every position it tries
    replacing the symbol with each alphabet symbol, inserting each alphabet
    symbol before it and deleting it, and applies the perturbation that
    lowers the SOD the most (if any) before moving on.  DP rows of the
    settled prefix are cached, so each trial only finishes the suffix.

    The result never has a larger SOD than ``candidate``.  Calling it again
    on its own output may improve it further.

    Args:
        candidate: The median estimate to improve.
        strings:   Input strings.
        weights:   Per-string multiplicities; None means 1.0 each.

    Returns:
        The improved median, of the same kind as the inputs.  Empty, of the
        same kind as ``candidate``, for empty input.
    """
    w = resolve_weights(strings, weights).tolist()
    ensure_compatible(candidate, *strings)
    if not strings:
        return rebuild([], candidate)
    like = strings[0]
    symbols = alphabet(strings)
    if not symbols:
        return rebuild([], like)

    rows = [list(range(len(s) + 1)) for s in strings]
    median: list[Hashable] = list(candidate)
    best = _finish_sod(rows, median, strings, w)
    start_sod = best

    pos = 0
    while pos <= len(median):
        operation = None
        choice = None

        if pos < len(median):
            current = median[pos]
            rest = median[pos + 1 :]
            for symbol in symbols:
                if symbol == current:
                    continue
                sod = _finish_sod(rows, [symbol, *rest], strings, w)
                if sod < best:
                    best, choice, operation = sod, symbol, "replace"

        rest = median[pos:]
        for symbol in symbols:
            sod = _finish_sod(rows, [symbol, *rest], strings, w)
            if sod < best:
                best, choice, operation = sod, symbol, "insert"

        if pos < len(median):
            sod = _finish_sod(rows, median[pos + 1 :], strings, w)
            if sod < best:
                best, operation = sod, "delete"

        if operation == "replace":
            median[pos] = choice
        elif operation == "insert":
            median.insert(pos, choice)
        elif operation == "delete":
            del median[pos]
            # The next symbol moved into `pos`; the cached rows still apply
            continue

        if pos == len(median):
            break
        rows = [
            _extend_row(row, s, median[pos], pos + 1)
            for s, row in zip(strings, rows, strict=True)
        ]
        pos += 1

    logger.debug("median improve: SOD %.3f -> %.3f", start_sod, best)
    return rebuild(median, like)
