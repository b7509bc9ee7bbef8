"""edits subpackage: edit-operation types, alignment and edit algebra.

Import from this module (not from sub-modules directly) to stay on the
stable interface.

Example::

    from levkit.edits import find_editops, to_block_ops, apply_editops

    ops = find_editops("spam", "park")
    assert apply_editops(ops, "spam", "park") == "park"
    blocks = to_block_ops(ops, 4, 4)
"""

from __future__ import annotations

from levkit.edits.algebra import (
    apply_editops,
    apply_opcodes,
    invert_editops,
    invert_opcodes,
    matching_blocks_from_editops,
    matching_blocks_from_opcodes,
    subtract,
)
from levkit.edits.backtrace import cost_matrix, find_editops
from levkit.edits.convert import normalize, to_atomic_ops, to_block_ops, total_cost
from levkit.edits.types import EditOp, EditOpError, EditType, MatchingBlock, OpCode
from levkit.edits.validation import check_errors, check_opcodes, validate, validate_opcodes

__all__ = [
    "EditOp",
    "EditOpError",
    "EditType",
    "MatchingBlock",
    "OpCode",
    "apply_editops",
    "apply_opcodes",
    "check_errors",
    "check_opcodes",
    "cost_matrix",
    "find_editops",
    "invert_editops",
    "invert_opcodes",
    "matching_blocks_from_editops",
    "matching_blocks_from_opcodes",
    "normalize",
    "subtract",
    "to_atomic_ops",
    "to_block_ops",
    "total_cost",
    "validate",
    "validate_opcodes",
]
