"""Distance-to-similarity normalizer shared by ``ratio``, ``seqratio`` and ``setratio``.

Formula::

    similarity = (total - distance) / total,   total = n_left + n_right

where the distance is priced so that replacing an item costs as much as a
deletion plus an insertion.  That keeps the result in [0, 1] and comparable
with block-matching similarity measures.

Empty inputs are handled explicitly instead of dividing by zero: two empty
inputs are identical (1.0).
"""

from __future__ import annotations


def normalize_similarity(distance: float, n_left: int, n_right: int) -> float:
    """Normalize a double-weighted edit distance to a [0, 1] similarity.

    Args:
        distance: Edit distance with substitutions costing 2.
        n_left:   Length of the left input.
        n_right:  Length of the right input.

    Returns:
        Float in [0.0, 1.0].  1.0 for two empty inputs.
    """
    total = n_left + n_right
    if total == 0:
        return 1.0
    return (total - distance) / total


def normalize_collection_similarity(distance: float, n_left: int, n_right: int) -> float:
    """Like ``normalize_similarity`` but a single empty side scores 0.0.

    Used for sequences and sets of strings, where an empty collection shares
    nothing with a non-empty one.
    """
    if n_left == 0 and n_right == 0:
        return 1.0
    if n_left == 0 or n_right == 0:
        return 0.0
    return normalize_similarity(distance, n_left, n_right)
