"""Conversions between atomic edit operations and difflib-style block opcodes."""

from __future__ import annotations

from collections.abc import Sequence

from levkit.edits.types import EditOp, EditType, OpCode

__all__ = ["normalize", "to_atomic_ops", "to_block_ops", "total_cost"]


def normalize(ops: Sequence[EditOp]) -> list[EditOp]:
    """Drop ``KEEP`` operations, leaving only actual edits."""
    return [op for op in ops if op.kind is not EditType.KEEP]


def to_block_ops(ops: Sequence[EditOp], len1: int, len2: int) -> list[OpCode]:
    """Convert atomic operations to block opcodes covering both sequences.

    Consecutive atomic operations of the same kind at adjacent positions
    merge into one block, and every gap between edits becomes a ``KEEP``
    block, so the result partitions ``[0, len1)`` and ``[0, len2)``.  The
    lengths are required because the trailing ``KEEP`` block cannot be
    inferred from the operations alone.

    Args:
        ops:  Ordered atomic operations (``KEEP`` entries are ignored).
        len1: Source length.
        len2: Destination length.

    Returns:
        Block opcodes in position order.
    """
    edits = normalize(ops)
    blocks: list[OpCode] = []
    spos = dpos = 0
    k = 0

    while k < len(edits):
        op = edits[k]
        if op.source_pos > spos or op.dest_pos > dpos:
            blocks.append(OpCode(EditType.KEEP, spos, op.source_pos, dpos, op.dest_pos))
            spos, dpos = op.source_pos, op.dest_pos

        kind = op.kind
        source_begin, dest_begin = spos, dpos
        while True:
            if kind is not EditType.INSERT:
                spos += 1
            if kind is not EditType.DELETE:
                dpos += 1
            k += 1
            if k == len(edits):
                break
            nxt = edits[k]
            if nxt.kind is not kind or nxt.source_pos != spos or nxt.dest_pos != dpos:
                break
        blocks.append(OpCode(kind, source_begin, spos, dest_begin, dpos))

    if spos < len1 or dpos < len2:
        blocks.append(OpCode(EditType.KEEP, spos, len1, dpos, len2))

    return blocks


def to_atomic_ops(ops: Sequence[OpCode], keep_keep: bool = False) -> list[EditOp]:
    """Expand block opcodes to one atomic operation per symbol.

    Args:
        ops:       Block opcodes.
        keep_keep: Expand ``KEEP`` blocks too.  When False (the default) the
                   result is normalized.

    Returns:
        Atomic operations in position order.
    """
    result: list[EditOp] = []
    for op in ops:
        kind = op.kind
        if kind is EditType.KEEP and not keep_keep:
            continue
        if kind is EditType.INSERT:
            result.extend(
                EditOp(kind, op.source_begin, op.dest_begin + j)
                for j in range(op.dest_end - op.dest_begin)
            )
        elif kind is EditType.DELETE:
            result.extend(
                EditOp(kind, op.source_begin + j, op.dest_begin)
                for j in range(op.source_end - op.source_begin)
            )
        else:
            result.extend(
                EditOp(kind, op.source_begin + j, op.dest_begin + j)
                for j in range(op.source_end - op.source_begin)
            )
    return result


def total_cost(ops: Sequence[EditOp] | Sequence[OpCode]) -> int:
    """Number of unit edits described by ``ops`` (``KEEP`` is free)."""
    cost = 0
    for op in ops:
        if op.kind is EditType.KEEP:
            continue
        if isinstance(op, OpCode):
            if op.kind is EditType.INSERT:
                cost += op.dest_end - op.dest_begin
            else:
                cost += op.source_end - op.source_begin
        else:
            cost += 1
    return cost
