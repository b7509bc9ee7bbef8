"""Algebra over edit sequences: invert, apply, matching blocks and subtract.

These functions trust their input.  Callers validate with
``levkit.edits.validation`` first (the public API in ``levkit.api`` always
does); feeding them an unordered or out-of-bounds sequence gives undefined
results rather than an error.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Hashable, Sequence

from levkit.edits.convert import normalize, to_block_ops
from levkit.edits.types import EditOp, EditOpError, EditType, MatchingBlock, OpCode
from levkit.errors import InvalidEditOpsError
from levkit.symbols import SymbolSequence, rebuild

__all__ = [
    "apply_editops",
    "apply_opcodes",
    "invert_editops",
    "invert_opcodes",
    "matching_blocks_from_editops",
    "matching_blocks_from_opcodes",
    "subtract",
]

# Net change of the source length caused by one operation of each kind
_LENGTH_SHIFT = {
    EditType.KEEP: 0,
    EditType.REPLACE: 0,
    EditType.INSERT: 1,
    EditType.DELETE: -1,
}


def invert_editops(ops: Sequence[EditOp]) -> list[EditOp]:
    """Swap source and destination: the result edits the destination back into the source."""
    return [EditOp(op.kind.inverted(), op.dest_pos, op.source_pos) for op in ops]


def invert_opcodes(ops: Sequence[OpCode]) -> list[OpCode]:
    """Block variant of ``invert_editops``: ranges are swapped along with the kinds."""
    return [
        OpCode(op.kind.inverted(), op.dest_begin, op.dest_end, op.source_begin, op.source_end)
        for op in ops
    ]


def apply_editops(ops: Sequence[EditOp], a: SymbolSequence, b: SymbolSequence) -> SymbolSequence:
    """Replay atomic operations on ``a``, taking new symbols from ``b``.

    ``ops`` may be any ordered subset of a full edit from ``a`` to ``b``; the
    result is then a partial edit, equal to ``b`` only when ``ops`` is
    complete.

    Returns:
        A sequence of the same kind as ``a``.
    """
    out: list[Hashable] = []
    cursor = 0
    for op in ops:
        # Copy the untouched source symbols up to the edit (through it for KEEP)
        end = op.source_pos + (1 if op.kind is EditType.KEEP else 0)
        if end > cursor:
            out.extend(a[cursor:end])
            cursor = end
        if op.kind is EditType.DELETE:
            cursor += 1
        elif op.kind is EditType.REPLACE:
            cursor += 1
            out.append(b[op.dest_pos])
        elif op.kind is EditType.INSERT:
            out.append(b[op.dest_pos])
    out.extend(a[cursor:])
    return rebuild(out, a)


def apply_opcodes(ops: Sequence[OpCode], a: SymbolSequence, b: SymbolSequence) -> SymbolSequence:
    """Replay block opcodes; the result has the same kind as ``a``."""
    out: list[Hashable] = []
    for op in ops:
        if op.kind is EditType.KEEP:
            out.extend(a[op.source_begin : op.source_end])
        elif op.kind in (EditType.INSERT, EditType.REPLACE):
            out.extend(b[op.dest_begin : op.dest_end])
    return rebuild(out, a)


def matching_blocks_from_opcodes(
    ops: Sequence[OpCode], len1: int, len2: int
) -> list[MatchingBlock]:
    """Runs of symbols kept by ``ops``, plus the ``(len1, len2, 0)`` sentinel.

    Adjacent ``KEEP`` blocks merge into one run.
    """
    blocks: list[MatchingBlock] = []
    run: MatchingBlock | None = None
    for op in ops:
        if op.kind is EditType.KEEP:
            length = op.source_end - op.source_begin
            if run is not None and run.source_pos + run.length == op.source_begin:
                run = dataclasses.replace(run, length=run.length + length)
            else:
                if run is not None:
                    blocks.append(run)
                run = MatchingBlock(op.source_begin, op.dest_begin, length)
        elif run is not None:
            blocks.append(run)
            run = None
    if run is not None:
        blocks.append(run)

    result = [block for block in blocks if block.length > 0]
    result.append(MatchingBlock(len1, len2, 0))
    return result


def matching_blocks_from_editops(
    ops: Sequence[EditOp], len1: int, len2: int
) -> list[MatchingBlock]:
    """Runs of symbols untouched by ``ops``, plus the ``(len1, len2, 0)`` sentinel."""
    return matching_blocks_from_opcodes(to_block_ops(ops, len1, len2), len1, len2)


def subtract(ops: Sequence[EditOp], subsequence: Sequence[EditOp]) -> list[EditOp]:
    """Remove an already-applied subsequence from an edit.

    Applying the result to ``apply_editops(subsequence, a, b)`` gives the same
    final sequence as applying ``ops`` to ``a``.  The remainder is built by
    re-indexing the skipped operations (each source position moves by the net
    length change of the subsequence entries consumed before it) instead of
    computing a fresh alignment, so in ambiguous cases it may differ from
    ``find_editops`` on the intermediate sequence.

    Args:
        ops:         A (normalized or not) atomic edit.
        subsequence: An ordered subset of ``ops``.

    Returns:
        Normalized remaining operations.

    Raises:
        InvalidEditOpsError: ``subsequence`` is not an ordered subset of ``ops``.
    """
    if len(normalize(subsequence)) > len(normalize(ops)):
        msg = "subsequence has more edits than the sequence it is subtracted from"
        raise InvalidEditOpsError(EditOpError.NOT_ORDERED, msg)

    remainder: list[EditOp] = []
    shift = 0
    j = 0
    for sub_op in subsequence:
        while j < len(ops) and ops[j] != sub_op:
            if ops[j].kind is not EditType.KEEP:
                remainder.append(_shifted(ops[j], shift))
            j += 1
        if j == len(ops):
            msg = f"{sub_op} is not part of the remaining edit sequence"
            raise InvalidEditOpsError(EditOpError.NOT_ORDERED, msg)
        shift += _LENGTH_SHIFT[sub_op.kind]
        j += 1

    remainder.extend(_shifted(op, shift) for op in ops[j:] if op.kind is not EditType.KEEP)
    return remainder


def _shifted(op: EditOp, shift: int) -> EditOp:
    return dataclasses.replace(op, source_pos=op.source_pos + shift) if shift else op
