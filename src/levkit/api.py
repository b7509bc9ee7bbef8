"""Public API functions for levkit.

Thin functions over ``levkit.algorithm`` and ``levkit.edits``.  Edit
operations coming from the caller are validated before any algebra runs, and
functions taking edit operations dispatch on their form (atomic ``EditOp``
or block ``OpCode``).  ``seqratio``, ``setratio`` and ``compare_sequences``
create a fresh ``SequenceComparator`` per call, so no state survives between
calls.

Arguments named ``len_or_seq`` accept either a length or the sequence itself.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from levkit.algorithm import distance as _distance
from levkit.algorithm import median as _median
from levkit.algorithm.config import JaroWinklerConfig, MedianConfig, MedianMethod
from levkit.comparator import SequenceComparator
from levkit.edits import algebra, convert, validation
from levkit.edits.backtrace import find_editops
from levkit.edits.types import EditOp, EditOpError, MatchingBlock, OpCode
from levkit.errors import InvalidArgumentError, InvalidEditOpsError
from levkit.result import SequenceComparison
from levkit.symbols import SymbolSequence

__all__ = [
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

Weights = Sequence[float] | np.ndarray | None
Ops = Sequence[EditOp] | Sequence[OpCode]

_SOLVERS: dict[MedianMethod, Callable[[Sequence[SymbolSequence], Weights], SymbolSequence]] = {
    MedianMethod.GREEDY: _median.greedy_median,
    MedianMethod.QUICK: _median.quick_median,
    MedianMethod.SET: _median.set_median,
}


# ----------------------------------------------------------------------
# Metrics
# ----------------------------------------------------------------------


def distance(a: SymbolSequence, b: SymbolSequence) -> int:
    """Return the Levenshtein distance between two sequences.

    Example::

        distance("Levenshtein", "Lenvinsten")   # 4
    """
    return _distance.levenshtein(a, b)


def ratio(a: SymbolSequence, b: SymbolSequence) -> float:
    """Return the similarity of two sequences in [0, 1].

    Computed as ``(lensum - d) / lensum`` with ``d`` the Levenshtein distance
    where a substitution costs 2.  Two empty sequences give 1.0.
    """
    return _distance.ratio(a, b)


def hamming(a: SymbolSequence, b: SymbolSequence) -> int:
    """Return the number of positions at which two equal-length sequences differ.

    Raises:
        LengthMismatchError: The sequences differ in length.
    """
    return _distance.hamming(a, b)


def jaro(a: SymbolSequence, b: SymbolSequence) -> float:
    """Return the Jaro similarity of two sequences in [0, 1]."""
    return _distance.jaro(a, b)


def jaro_winkler(
    a: SymbolSequence,
    b: SymbolSequence,
    prefix_weight: float = 0.1,
    config: JaroWinklerConfig | None = None,
) -> float:
    """Return the Jaro-Winkler similarity of two sequences in [0, 1].

    Args:
        a:             First sequence.
        b:             Second sequence.
        prefix_weight: Boost per common-prefix symbol.  Ignored when
                       ``config`` is given.
        config:        Full parameter set.

    Raises:
        InvalidArgumentError: ``prefix_weight`` is negative.
    """
    return _distance.jaro_winkler(a, b, prefix_weight=prefix_weight, config=config)


# ----------------------------------------------------------------------
# Medians
# ----------------------------------------------------------------------


def median(
    strings: Sequence[SymbolSequence],
    weights: Weights = None,
    config: MedianConfig | None = None,
) -> SymbolSequence:
    """Return an approximate generalized median of ``strings``.

    Args:
        strings: Input strings, all of one kind.
        weights: One non-negative multiplicity per string; None means 1.0 each.
        config:  Solver choice and number of improvement passes.  Defaults
                 to ``MedianConfig()`` (greedy, no extra passes).

    Returns:
        The median, of the same kind as the inputs.

    Example::

        median(["SpSm", "mpamm", "Spam", "Spa", "Sua", "hSam"])   # "Spam"
    """
    config = config if config is not None else MedianConfig()
    strings = list(strings)
    result = _SOLVERS[config.method](strings, weights)
    for _ in range(config.improve_passes):
        improved = _median.median_improve(result, strings, weights)
        if improved == result:
            break
        result = improved
    return result


def median_improve(
    candidate: SymbolSequence,
    strings: Sequence[SymbolSequence],
    weights: Weights = None,
) -> SymbolSequence:
    """Improve a median estimate by one pass of single-symbol perturbations."""
    return _median.median_improve(candidate, list(strings), weights)


def quickmedian(strings: Sequence[SymbolSequence], weights: Weights = None) -> SymbolSequence:
    """Return a very approximate generalized median, computed quickly."""
    return _median.quick_median(list(strings), weights)


def setmedian(strings: Sequence[SymbolSequence], weights: Weights = None) -> SymbolSequence:
    """Return the member of ``strings`` closest to all the others."""
    return _median.set_median(list(strings), weights)


# ----------------------------------------------------------------------
# Sequences and sets of strings
# ----------------------------------------------------------------------


def seqratio(a: Sequence[SymbolSequence], b: Sequence[SymbolSequence]) -> float:
    """Return the similarity of two sequences of strings in [0, 1].

    Example::

        seqratio(["newspaper", "litter bin", "tinny", "antelope"],
                 ["caribou", "sausage", "gorn", "woody"])   # ~0.2152
    """
    return SequenceComparator().seqratio(a, b)


def setratio(a: Sequence[SymbolSequence], b: Sequence[SymbolSequence]) -> float:
    """Return the similarity of two sets of strings in [0, 1]; order is ignored."""
    return SequenceComparator().setratio(a, b)


def compare_sequences(
    a: Sequence[SymbolSequence],
    b: Sequence[SymbolSequence],
    ordered: bool = True,
) -> SequenceComparison:
    """Compare two collections of strings and return a rich ``SequenceComparison``.

    Creates a fresh ``SequenceComparator`` per call.

    Args:
        a:       Left tokens.
        b:       Right tokens.
        ordered: Compare as sequences (True) or as sets (False).
    """
    return SequenceComparator().compare(a, b, ordered=ordered)


# ----------------------------------------------------------------------
# Edit operations
# ----------------------------------------------------------------------


def _length(len_or_seq: int | SymbolSequence) -> int:
    if isinstance(len_or_seq, int):
        if len_or_seq < 0:
            msg = f"length must be >= 0, got {len_or_seq}"
            raise InvalidArgumentError(msg)
        return len_or_seq
    return len(len_or_seq)


def _is_blocks(ops: Ops) -> bool:
    return bool(ops) and isinstance(ops[0], OpCode)


def editops(*args: Any) -> list[EditOp]:
    """Find or convert atomic edit operations.

    ``editops(a, b)`` finds a minimal edit turning ``a`` into ``b``.

    ``editops(ops, len_or_seq1, len_or_seq2)`` converts block opcodes to
    atomic operations (dropping ``KEEP``); atomic input is returned
    normalized.  The input is validated first.

    Raises:
        InvalidEditOpsError: ``ops`` is not a valid edit for the lengths.
        TypeError: Wrong number of arguments, or text mixed with binary.

    Example::

        editops("spam", "park")
        # [EditOp(DELETE, 0, 0), EditOp(INSERT, 3, 2), EditOp(REPLACE, 3, 3)]
    """
    if len(args) == 2:
        return find_editops(*args)
    if len(args) != 3:
        msg = f"editops() takes 2 or 3 arguments ({len(args)} given)"
        raise TypeError(msg)

    ops, first, second = args
    len1, len2 = _length(first), _length(second)
    if _is_blocks(ops):
        validation.validate_opcodes(len1, len2, ops)
        return convert.to_atomic_ops(ops)
    validation.validate(len1, len2, ops)
    return convert.normalize(ops)


def opcodes(*args: Any) -> list[OpCode]:
    """Find or convert block opcodes.

    ``opcodes(a, b)`` finds a minimal edit turning ``a`` into ``b`` in
    difflib-style block form (``KEEP`` blocks included).

    ``opcodes(ops, len_or_seq1, len_or_seq2)`` converts atomic operations to
    blocks; block input is returned as a validated copy.

    Raises:
        InvalidEditOpsError: ``ops`` is not a valid edit for the lengths.
        TypeError: Wrong number of arguments, or text mixed with binary.

    Example::

        opcodes("spam", "park")
        # [OpCode(DELETE, 0, 1, 0, 0), OpCode(KEEP, 1, 3, 0, 2),
        #  OpCode(INSERT, 3, 3, 2, 3), OpCode(REPLACE, 3, 4, 3, 4)]
    """
    if len(args) == 2:
        a, b = args
        return convert.to_block_ops(find_editops(a, b), len(a), len(b))
    if len(args) != 3:
        msg = f"opcodes() takes 2 or 3 arguments ({len(args)} given)"
        raise TypeError(msg)

    ops, first, second = args
    len1, len2 = _length(first), _length(second)
    if _is_blocks(ops):
        validation.validate_opcodes(len1, len2, ops)
        return list(ops)
    validation.validate(len1, len2, ops)
    return convert.to_block_ops(ops, len1, len2)


def inverse(ops: Ops) -> list[EditOp] | list[OpCode]:
    """Return the inverse edit, turning the destination back into the source.

    Example::

        inverse(editops("spam", "park")) == editops("park", "spam")   # True
    """
    validation.validate(None, None, ops)
    if _is_blocks(ops):
        return algebra.invert_opcodes(ops)  # type: ignore[arg-type]
    return algebra.invert_editops(ops)  # type: ignore[arg-type]


def apply_edit(ops: Ops, a: SymbolSequence, b: SymbolSequence) -> SymbolSequence:
    """Apply an edit (possibly partial, when atomic) to ``a``, taking new symbols from ``b``.

    An empty edit returns ``a`` unchanged.

    Raises:
        InvalidEditOpsError: ``ops`` is not a valid edit for ``a`` and ``b``.
    """
    if not ops:
        return a
    if _is_blocks(ops):
        validation.validate_opcodes(len(a), len(b), ops)  # type: ignore[arg-type]
        return algebra.apply_opcodes(ops, a, b)  # type: ignore[arg-type]
    validation.validate(len(a), len(b), ops)
    return algebra.apply_editops(ops, a, b)  # type: ignore[arg-type]


def matching_blocks(
    ops: Ops,
    len_or_seq1: int | SymbolSequence,
    len_or_seq2: int | SymbolSequence,
) -> list[MatchingBlock]:
    """Return the runs of symbols an edit leaves untouched, difflib style.

    The list always ends with the ``(len1, len2, 0)`` sentinel.

    Example::

        a, b = "spam", "park"
        matching_blocks(editops(a, b), a, b)
        # [MatchingBlock(1, 0, 2), MatchingBlock(4, 4, 0)]
    """
    len1, len2 = _length(len_or_seq1), _length(len_or_seq2)
    if _is_blocks(ops):
        validation.validate_opcodes(len1, len2, ops)  # type: ignore[arg-type]
        return algebra.matching_blocks_from_opcodes(ops, len1, len2)  # type: ignore[arg-type]
    validation.validate(len1, len2, ops)
    return algebra.matching_blocks_from_editops(ops, len1, len2)  # type: ignore[arg-type]


def subtract_edit(edit: Sequence[EditOp], subsequence: Sequence[EditOp]) -> list[EditOp]:
    """Remove an already-applied subsequence from an atomic edit.

    Raises:
        InvalidEditOpsError: Block opcodes were given, or ``subsequence`` is
            not an ordered subset of ``edit``.

    Example::

        e = editops("man", "scotsman")
        partial = apply_edit(e[:3], "man", "scotsman")          # "scoman"
        apply_edit(subtract_edit(e, e[:3]), partial, "scotsman")  # "scotsman"
    """
    if _is_blocks(edit) or _is_blocks(subsequence):
        msg = "subtract_edit() accepts atomic edit operations only"
        raise InvalidEditOpsError(EditOpError.BAD_KIND, msg)
    validation.validate(None, None, edit)
    validation.validate(None, None, subsequence)
    return algebra.subtract(edit, subsequence)


def check_errors(
    ops: Ops,
    len_or_seq1: int | SymbolSequence,
    len_or_seq2: int | SymbolSequence,
) -> EditOpError:
    """Check an edit against the given lengths without raising.

    Returns:
        ``EditOpError.OK`` or the first problem found.
    """
    return validation.check_errors(_length(len_or_seq1), _length(len_or_seq2), ops)
