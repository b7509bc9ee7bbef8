"""Optimal alignment: Levenshtein cost matrix plus a deterministic backtrace.

The full cost matrix is kept (unlike ``levkit.algorithm.distance``, which
only needs a rolling row) so the path back from the bottom-right cell can be
recovered.  Among equally cheap predecessor moves the backtrace always picks
the same one, in this order:

1. continue a run of insertions,
2. continue a run of deletions,
3. keep (diagonal, equal symbols),
4. replace (diagonal),
5. start insertions,
6. start deletions.

Preferring to continue runs keeps the edit compact in block form, and the
fixed order makes the result reproducible: ``find_editops("spam", "park")``
is always ``[DELETE(0, 0), INSERT(3, 2), REPLACE(3, 3)]``.
"""

from __future__ import annotations

from levkit.algorithm.distance import common_prefix_length, common_suffix_length
from levkit.edits.types import EditOp, EditType
from levkit.symbols import SymbolSequence, ensure_compatible

__all__ = ["cost_matrix", "find_editops"]


def cost_matrix(a: SymbolSequence, b: SymbolSequence) -> list[list[int]]:
    """Full unit-cost Levenshtein matrix.

    ``matrix[i][j]`` is the distance between ``a[:i]`` and ``b[:j]``.
    """
    n = len(b)
    matrix = [list(range(n + 1))]
    for i, ch_a in enumerate(a, start=1):
        prev = matrix[-1]
        row = [i] + [0] * n
        for j, ch_b in enumerate(b, start=1):
            row[j] = min(
                row[j - 1] + 1,  # insert
                prev[j] + 1,  # delete
                prev[j - 1] + (ch_a != ch_b),  # keep / replace
            )
        matrix.append(row)
    return matrix


def find_editops(a: SymbolSequence, b: SymbolSequence) -> list[EditOp]:
    """Find an optimal, ordered and normalized edit from ``a`` to ``b``.

    Args:
        a: Source sequence.
        b: Destination sequence.

    Returns:
        Atomic operations without ``KEEP`` entries, in position order.  Their
        number equals ``levenshtein(a, b)``.
    """
    ensure_compatible(a, b)

    # Shared prefix/suffix never needs editing; positions are re-based below
    offset = common_prefix_length(a, b)
    a, b = a[offset:], b[offset:]
    suffix = common_suffix_length(a, b)
    if suffix:
        a, b = a[: len(a) - suffix], b[: len(b) - suffix]

    matrix = cost_matrix(a, b)
    return _backtrace(matrix, a, b, offset)


def _backtrace(
    matrix: list[list[int]],
    a: SymbolSequence,
    b: SymbolSequence,
    offset: int,
) -> list[EditOp]:
    """Walk from ``matrix[len(a)][len(b)]`` back to ``matrix[0][0]``."""
    ops: list[EditOp] = []
    i, j = len(a), len(b)
    direction = 0  # -1 inserting, +1 deleting, 0 diagonal

    while i or j:
        cost = matrix[i][j]
        if direction < 0 and j and cost == matrix[i][j - 1] + 1:
            j -= 1
            ops.append(EditOp(EditType.INSERT, i + offset, j + offset))
        elif direction > 0 and i and cost == matrix[i - 1][j] + 1:
            i -= 1
            ops.append(EditOp(EditType.DELETE, i + offset, j + offset))
        elif i and j and cost == matrix[i - 1][j - 1] and a[i - 1] == b[j - 1]:
            i -= 1
            j -= 1
            direction = 0
        elif i and j and cost == matrix[i - 1][j - 1] + 1:
            i -= 1
            j -= 1
            ops.append(EditOp(EditType.REPLACE, i + offset, j + offset))
            direction = 0
        elif j and cost == matrix[i][j - 1] + 1:
            j -= 1
            ops.append(EditOp(EditType.INSERT, i + offset, j + offset))
            direction = -1
        elif i and cost == matrix[i - 1][j] + 1:
            i -= 1
            ops.append(EditOp(EditType.DELETE, i + offset, j + offset))
            direction = 1
        else:
            msg = f"no optimal predecessor for cell ({i}, {j})"
            raise RuntimeError(msg)

    ops.reverse()
    return ops
