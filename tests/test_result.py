"""Tests for the SequenceComparison result dataclass."""

from __future__ import annotations

import dataclasses

import pytest

from levkit.result import SequenceComparison


@pytest.fixture
def result() -> SequenceComparison:
    return SequenceComparison(
        similarity_score=0.8,
        distance=1.0,
        ordered=True,
        matched_pairs=[(0, 0), (1, 2)],
        unmatched_left=[],
        unmatched_right=[1],
        computation_time_ms=0.05,
    )


class TestSequenceComparison:
    def test_fields(self, result: SequenceComparison) -> None:
        assert result.similarity_score == 0.8
        assert result.distance == 1.0
        assert result.ordered is True
        assert result.matched_pairs == [(0, 0), (1, 2)]
        assert result.unmatched_left == []
        assert result.unmatched_right == [1]
        assert result.computation_time_ms == 0.05

    def test_frozen(self, result: SequenceComparison) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.similarity_score = 1.0  # type: ignore[misc]

    def test_slots(self, result: SequenceComparison) -> None:
        assert not hasattr(result, "__dict__")

    def test_equality(self, result: SequenceComparison) -> None:
        assert result == dataclasses.replace(result)
