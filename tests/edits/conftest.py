"""Shared edit-operation fixtures."""

from __future__ import annotations

import pytest

from levkit.edits.types import EditOp, EditType, OpCode


@pytest.fixture
def spam_park_editops() -> list[EditOp]:
    return [
        EditOp(EditType.DELETE, 0, 0),
        EditOp(EditType.INSERT, 3, 2),
        EditOp(EditType.REPLACE, 3, 3),
    ]


@pytest.fixture
def spam_park_opcodes() -> list[OpCode]:
    return [
        OpCode(EditType.DELETE, 0, 1, 0, 0),
        OpCode(EditType.KEEP, 1, 3, 0, 2),
        OpCode(EditType.INSERT, 3, 3, 2, 3),
        OpCode(EditType.REPLACE, 3, 4, 3, 4),
    ]
