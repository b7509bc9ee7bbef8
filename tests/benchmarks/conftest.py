"""Deterministic input generators for performance benchmarks.

All generators produce fixed, reproducible strings. No random values.
Three tiers: short words, 1000-character texts, and word collections.
"""

from __future__ import annotations

import pytest

_WORDS = [
    "spam", "eggs", "ham", "bacon", "sausage", "lobster", "thermidor",
    "crevettes", "mornay", "truffle", "pate", "brandy", "shrimps",
]


def generate_text(num_words: int, offset: int = 0) -> str:
    """Join words from the fixed vocabulary into a deterministic text."""
    return " ".join(_WORDS[(i * 7 + offset) % len(_WORDS)] for i in range(num_words))


def _mutate(text: str, every: int) -> str:
    """Swap every ``every``-th character for a fixed replacement."""
    chars = list(text)
    for i in range(0, len(chars), every):
        chars[i] = "x" if chars[i] != "x" else "y"
    return "".join(chars)


@pytest.fixture
def pair_short() -> tuple[str, str]:
    """Two short words differing in a handful of positions."""
    return "Levenshtein", "Lenvinsten"


@pytest.fixture
def pair_long_similar() -> tuple[str, str]:
    """~1000-character text and a lightly mutated copy."""
    text = generate_text(160)[:1000]
    return text, _mutate(text, 25)


@pytest.fixture
def pair_long_dissimilar() -> tuple[str, str]:
    """Two ~1000-character texts drawn from shifted vocabularies."""
    return generate_text(160)[:1000], generate_text(160, offset=5)[:1000]


@pytest.fixture
def word_collections() -> tuple[list[str], list[str]]:
    """Two 40-word collections sharing most of their words."""
    left = generate_text(40).split()
    right = generate_text(40, offset=1).split()
    return left, right


@pytest.fixture
def median_set() -> list[str]:
    """Twelve mutated copies of one 40-character phrase."""
    base = generate_text(8)[:40]
    return [_mutate(base, every) for every in range(3, 15)]
