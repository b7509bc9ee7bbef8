"""Exception types raised by levkit.

Every error is a ``ValueError`` subclass so callers that only care about
"bad input" can catch the builtin.  Allocation failures are not wrapped:
Python's own ``MemoryError`` propagates unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from levkit.edits.types import EditOpError

__all__ = [
    "InvalidArgumentError",
    "InvalidEditOpsError",
    "LengthMismatchError",
    "LevenshteinError",
]


class LevenshteinError(ValueError):
    """Base class for all levkit errors."""


class LengthMismatchError(LevenshteinError):
    """Two sequences were required to have the same length."""


class InvalidArgumentError(LevenshteinError):
    """An argument is outside its documented domain."""


class InvalidEditOpsError(LevenshteinError):
    """An edit-operation sequence failed structural validation.

    Attributes:
        kind: The ``EditOpError`` describing the first problem found.
    """

    def __init__(self, kind: EditOpError, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or f"edit operations are invalid: {kind}")
