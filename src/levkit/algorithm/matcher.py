"""Optimal bipartite assignment of tokens between two sets.

Wraps scipy's ``linear_sum_assignment``, which solves rectangular problems
directly: every token of the smaller side is assigned, and the surplus
tokens of the larger side stay unassigned.  That is the same optimum as
padding the smaller side with dummy tokens whose pair cost is the unit
insert/delete cost, because the padded rows would add a constant.
"""

from __future__ import annotations

import numpy as np
from scipy.optimize import linear_sum_assignment  # type: ignore[import-untyped]

__all__ = ["hungarian_match"]


def hungarian_match(cost_matrix: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Compute the minimum-cost assignment for a ``(m, n)`` cost matrix.

    Args:
        cost_matrix: 2-D matrix of finite, non-negative pair costs.

    Returns:
        Tuple ``(row_ind, col_ind)`` of 1-D integer arrays of length
        ``min(m, n)``, sorted by row.  Empty arrays when either side is empty.
    """
    cost = np.asarray(cost_matrix, dtype=np.float64)
    if cost.size == 0:
        return np.array([], dtype=int), np.array([], dtype=int)

    row_ind, col_ind = linear_sum_assignment(cost)
    return row_ind, col_ind
