"""Structural validation of edit-operation sequences.

``check_errors`` reports the first problem as an ``EditOpError`` and never
raises; ``validate`` raises ``InvalidEditOpsError`` instead.  The algebra in
``levkit.edits.algebra`` assumes its input passed one of them.

Atomic sequences may be partial (any ordered subset of a full edit).  Block
sequences must always describe a complete transformation.
"""

from __future__ import annotations

from collections.abc import Sequence

from levkit.edits.types import EditOp, EditOpError, EditType, OpCode
from levkit.errors import InvalidEditOpsError

__all__ = ["check_errors", "check_opcodes", "validate", "validate_opcodes"]


def check_errors(
    len1: int | None,
    len2: int | None,
    ops: Sequence[EditOp] | Sequence[OpCode],
) -> EditOpError:
    """Check whether ``ops`` is a valid edit between sequences of the given lengths.

    Args:
        len1: Source length, or None to skip checks that need it.
        len2: Destination length, or None to skip checks that need it.
        ops:  Atomic or block operations (not mixed).

    Returns:
        ``EditOpError.OK`` or the first problem found.  An empty list has no
        element type and is treated as an empty (partial) atomic edit; use
        ``check_opcodes`` when a complete block edit is required.
    """
    if not ops:
        return EditOpError.OK
    if all(isinstance(op, EditOp) for op in ops):
        return _check_editops(len1, len2, ops)  # type: ignore[arg-type]
    if all(isinstance(op, OpCode) for op in ops):
        return _check_opcodes(len1, len2, ops)  # type: ignore[arg-type]
    return EditOpError.BAD_KIND


def check_opcodes(len1: int | None, len2: int | None, ops: Sequence[OpCode]) -> EditOpError:
    """Block-only variant of ``check_errors``; an empty list must span two empty sequences."""
    if not ops:
        return _check_empty_blocks(len1, len2)
    if not all(isinstance(op, OpCode) for op in ops):
        return EditOpError.BAD_KIND
    return _check_opcodes(len1, len2, ops)


def validate(
    len1: int | None,
    len2: int | None,
    ops: Sequence[EditOp] | Sequence[OpCode],
) -> None:
    """Raise ``InvalidEditOpsError`` unless ``check_errors`` reports OK."""
    _raise_for(check_errors(len1, len2, ops))


def validate_opcodes(len1: int | None, len2: int | None, ops: Sequence[OpCode]) -> None:
    """Raise ``InvalidEditOpsError`` unless ``check_opcodes`` reports OK."""
    _raise_for(check_opcodes(len1, len2, ops))


def _raise_for(error: EditOpError) -> None:
    if error is not EditOpError.OK:
        raise InvalidEditOpsError(error)


def _check_empty_blocks(len1: int | None, len2: int | None) -> EditOpError:
    if (len1 or 0) == 0 and (len2 or 0) == 0:
        return EditOpError.OK
    return EditOpError.INCOMPLETE_SPAN


def _check_editops(len1: int | None, len2: int | None, ops: Sequence[EditOp]) -> EditOpError:
    for op in ops:
        if not isinstance(op.kind, EditType):
            return EditOpError.BAD_KIND
        if op.source_pos < 0 or op.dest_pos < 0:
            return EditOpError.OUT_OF_BOUNDS
        if len1 is not None:
            if op.source_pos > len1:
                return EditOpError.OUT_OF_BOUNDS
            if op.source_pos == len1 and op.kind is not EditType.INSERT:
                return EditOpError.OUT_OF_BOUNDS
        if len2 is not None:
            if op.dest_pos > len2:
                return EditOpError.OUT_OF_BOUNDS
            if op.dest_pos == len2 and op.kind is not EditType.DELETE:
                return EditOpError.OUT_OF_BOUNDS

    for prev, op in zip(ops, ops[1:]):
        if op.source_pos < prev.source_pos or op.dest_pos < prev.dest_pos:
            return EditOpError.NOT_ORDERED

    return EditOpError.OK


def _check_opcodes(len1: int | None, len2: int | None, ops: Sequence[OpCode]) -> EditOpError:
    first, last = ops[0], ops[-1]
    if first.source_begin != 0 or first.dest_begin != 0:
        return EditOpError.INCOMPLETE_SPAN
    if (len1 is not None and last.source_end != len1) or (
        len2 is not None and last.dest_end != len2
    ):
        return EditOpError.INCOMPLETE_SPAN

    for op in ops:
        if not isinstance(op.kind, EditType):
            return EditOpError.BAD_KIND
        if (len1 is not None and op.source_end > len1) or (
            len2 is not None and op.dest_end > len2
        ):
            return EditOpError.OUT_OF_BOUNDS
        source_span = op.source_end - op.source_begin
        dest_span = op.dest_end - op.dest_begin
        if source_span < 0 or dest_span < 0:
            return EditOpError.BAD_BLOCK_BOUNDARY
        if op.kind in (EditType.KEEP, EditType.REPLACE):
            if source_span != dest_span or dest_span == 0:
                return EditOpError.BAD_BLOCK_BOUNDARY
        elif op.kind is EditType.INSERT:
            if dest_span == 0 or source_span != 0:
                return EditOpError.BAD_BLOCK_BOUNDARY
        elif source_span == 0 or dest_span != 0:
            return EditOpError.BAD_BLOCK_BOUNDARY

    for prev, op in zip(ops, ops[1:]):
        if op.source_begin != prev.source_end or op.dest_begin != prev.dest_end:
            return EditOpError.NOT_ORDERED

    return EditOpError.OK
