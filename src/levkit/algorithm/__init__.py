"""algorithm subpackage: string metrics, medians and sequence/set distance.

Import from this module (not from sub-modules directly) to stay on the
stable interface.

Example::

    from levkit.algorithm import greedy_median, levenshtein, seqratio

    levenshtein("Levenshtein", "Lenvinsten")          # 4
    greedy_median(["SpSm", "mpamm", "Spam", "Spa", "Sua", "hSam"])  # "Spam"
"""

from __future__ import annotations

from levkit.algorithm.config import JaroWinklerConfig, MedianConfig, MedianMethod
from levkit.algorithm.costs import cost_delete, cost_insert, cost_substitute
from levkit.algorithm.distance import hamming, jaro, jaro_winkler, levenshtein, ratio
from levkit.algorithm.median import (
    greedy_median,
    median_improve,
    quick_median,
    set_median,
    set_median_index,
    weighted_sod,
)
from levkit.algorithm.sequence import (
    align_sequences,
    match_sets,
    seq_distance,
    seqratio,
    set_distance,
    setratio,
)

__all__ = [
    "JaroWinklerConfig",
    "MedianConfig",
    "MedianMethod",
    "align_sequences",
    "cost_delete",
    "cost_insert",
    "cost_substitute",
    "greedy_median",
    "hamming",
    "jaro",
    "jaro_winkler",
    "levenshtein",
    "match_sets",
    "median_improve",
    "quick_median",
    "ratio",
    "seq_distance",
    "seqratio",
    "set_distance",
    "set_median",
    "set_median_index",
    "setratio",
    "weighted_sod",
]
