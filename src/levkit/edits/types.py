"""Value types of the edit-operation model.

Provides the atomic ``EditOp``, the difflib-compatible block ``OpCode``, the
``MatchingBlock`` and the enumerations naming edit kinds and validation
errors.  All are immutable so edit sequences can be shared freely.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["EditOp", "EditOpError", "EditType", "MatchingBlock", "OpCode"]


class EditType(StrEnum):
    """Kind of an edit operation.

    - KEEP    -> "keep"    : symbol carried over unchanged (difflib "equal")
    - REPLACE -> "replace" : symbol substituted
    - INSERT  -> "insert"  : destination symbol inserted
    - DELETE  -> "delete"  : source symbol removed
    """

    KEEP = auto()
    REPLACE = auto()
    INSERT = auto()
    DELETE = auto()

    def inverted(self) -> EditType:
        """The kind seen from the destination side (INSERT <-> DELETE)."""
        if self is EditType.INSERT:
            return EditType.DELETE
        if self is EditType.DELETE:
            return EditType.INSERT
        return self


class EditOpError(StrEnum):
    """Result of structural validation of an edit sequence."""

    OK = auto()
    BAD_KIND = auto()
    OUT_OF_BOUNDS = auto()
    NOT_ORDERED = auto()
    BAD_BLOCK_BOUNDARY = auto()
    INCOMPLETE_SPAN = auto()


@dataclass(frozen=True, slots=True)
class EditOp:
    """An atomic edit operation on a single symbol.

    Positions are left edges: ``INSERT(3, 2)`` inserts ``dest[2]`` before
    ``source[3]``.

    Attributes:
        kind:       What happens at this position.
        source_pos: Offset into the source sequence.
        dest_pos:   Offset into the destination sequence.
    """

    kind: EditType
    source_pos: int
    dest_pos: int

    def as_tuple(self) -> tuple[str, int, int]:
        return (str(self.kind), self.source_pos, self.dest_pos)


@dataclass(frozen=True, slots=True)
class OpCode:
    """A block edit operation spanning half-open ranges of both sequences.

    A complete ``OpCode`` list partitions both sequences: blocks are
    contiguous, the first starts at (0, 0) and the last ends at
    (len1, len2).

    Attributes:
        kind:         What happens to the block.
        source_begin: Start of the source range.
        source_end:   End (exclusive) of the source range.
        dest_begin:   Start of the destination range.
        dest_end:     End (exclusive) of the destination range.
    """

    kind: EditType
    source_begin: int
    source_end: int
    dest_begin: int
    dest_end: int

    def as_tuple(self) -> tuple[str, int, int, int, int]:
        return (
            str(self.kind),
            self.source_begin,
            self.source_end,
            self.dest_begin,
            self.dest_end,
        )


@dataclass(frozen=True, slots=True)
class MatchingBlock:
    """A run of ``length`` symbols equal in both sequences.

    Attributes:
        source_pos: Start of the run in the source.
        dest_pos:   Start of the run in the destination.
        length:     Number of symbols; 0 only for the terminating sentinel.
    """

    source_pos: int
    dest_pos: int
    length: int
