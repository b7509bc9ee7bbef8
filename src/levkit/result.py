"""SequenceComparison dataclass: the rich result of a token comparison."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SequenceComparison"]


@dataclass(frozen=True, slots=True)
class SequenceComparison:
    """Rich result of ``SequenceComparator.compare()``.

    Attributes:
        similarity_score: Normalised similarity in [0.0, 1.0].  1.0 is identical.
        distance: Token-level distance the score was derived from.
        ordered: True for sequence comparison, False for set comparison.
        matched_pairs: ``(left_index, right_index)`` pairs of tokens that were
            kept or substituted, in increasing left index order.
        unmatched_left: Indices of left tokens that were deleted.
        unmatched_right: Indices of right tokens that were inserted.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    similarity_score: float
    distance: float
    ordered: bool
    matched_pairs: list[tuple[int, int]]
    unmatched_left: list[int]
    unmatched_right: list[int]
    computation_time_ms: float
