"""Symbol sequences: the one generic input type of every algorithm.

A symbol sequence is anything indexable whose items are hashable and
totally ordered.  ``str`` (code points) and ``bytes`` (byte values) are the
two first-class kinds; tuples or lists of other comparable symbols work too.
The algorithms only index, compare, hash and sort symbols, so a single
implementation serves every kind.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import Any, TypeAlias

__all__ = ["SymbolSequence", "alphabet", "ensure_compatible", "rebuild"]

SymbolSequence: TypeAlias = str | bytes | Sequence[Hashable]

_BINARY = (bytes, bytearray, memoryview)


def ensure_compatible(*seqs: Any) -> None:
    """Raise ``TypeError`` if text and binary sequences are mixed.

    ``"a" == 97`` is False in Python, so comparing a ``str`` with ``bytes``
    would silently report everything as different.
    """
    has_text = any(isinstance(s, str) for s in seqs)
    has_binary = any(isinstance(s, _BINARY) for s in seqs)
    if has_text and has_binary:
        msg = "cannot compare text (str) with binary (bytes) sequences"
        raise TypeError(msg)


def alphabet(strings: Iterable[SymbolSequence]) -> list[Hashable]:
    """Return the sorted list of distinct symbols used by ``strings``."""
    seen: set[Hashable] = set()
    for s in strings:
        seen.update(s)
    return sorted(seen)  # type: ignore[type-var]


def rebuild(symbols: Iterable[Hashable], like: SymbolSequence | None) -> SymbolSequence:
    """Turn ``symbols`` into a sequence of the same kind as ``like``.

    Args:
        symbols: Symbols in order.
        like:    Prototype sequence.  ``None`` (no input to copy the kind
                 from) yields a ``str``.

    Returns:
        ``str`` for text prototypes, ``bytes`` for binary prototypes and a
        ``tuple`` for everything else.
    """
    if like is None or isinstance(like, str):
        return "".join(symbols)  # type: ignore[arg-type]
    if isinstance(like, _BINARY):
        return bytes(symbols)  # type: ignore[arg-type]
    return tuple(symbols)
