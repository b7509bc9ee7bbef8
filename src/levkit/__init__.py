"""levkit - Levenshtein distance, edit operations and string medians."""

from __future__ import annotations

from levkit.algorithm.config import JaroWinklerConfig, MedianConfig, MedianMethod
from levkit.api import (
    apply_edit,
    check_errors,
    compare_sequences,
    distance,
    editops,
    hamming,
    inverse,
    jaro,
    jaro_winkler,
    matching_blocks,
    median,
    median_improve,
    opcodes,
    quickmedian,
    ratio,
    seqratio,
    setmedian,
    setratio,
    subtract_edit,
)
from levkit.comparator import SequenceComparator
from levkit.edits.types import EditOp, EditOpError, EditType, MatchingBlock, OpCode
from levkit.errors import (
    InvalidArgumentError,
    InvalidEditOpsError,
    LengthMismatchError,
    LevenshteinError,
)
from levkit.result import SequenceComparison

__version__: str = "0.1.0"
__all__: list[str] = [
    "EditOp",
    "EditOpError",
    "EditType",
    "InvalidArgumentError",
    "InvalidEditOpsError",
    "JaroWinklerConfig",
    "LengthMismatchError",
    "LevenshteinError",
    "MatchingBlock",
    "MedianConfig",
    "MedianMethod",
    "OpCode",
    "SequenceComparator",
    "SequenceComparison",
    "apply_edit",
    "check_errors",
    "compare_sequences",
    "distance",
    "editops",
    "hamming",
    "inverse",
    "jaro",
    "jaro_winkler",
    "matching_blocks",
    "median",
    "median_improve",
    "opcodes",
    "quickmedian",
    "ratio",
    "seqratio",
    "setmedian",
    "setratio",
    "subtract_edit",
]
