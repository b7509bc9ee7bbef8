"""Tests for the public API functions in levkit.api.

Covers argument dispatch (finding vs converting edits, atomic vs block
operations, lengths vs sequences), validation before the algebra runs, the
median configuration and the fresh-comparator-per-call behaviour.
"""

from __future__ import annotations

import pytest

from levkit import api
from levkit.algorithm.config import MedianConfig, MedianMethod
from levkit.algorithm.median import weighted_sod
from levkit.edits.types import EditOp, EditOpError, EditType, MatchingBlock, OpCode
from levkit.errors import InvalidArgumentError, InvalidEditOpsError

SPAM_PARK_EDITOPS = [
    EditOp(EditType.DELETE, 0, 0),
    EditOp(EditType.INSERT, 3, 2),
    EditOp(EditType.REPLACE, 3, 3),
]
SPAM_PARK_OPCODES = [
    OpCode(EditType.DELETE, 0, 1, 0, 0),
    OpCode(EditType.KEEP, 1, 3, 0, 2),
    OpCode(EditType.INSERT, 3, 3, 2, 3),
    OpCode(EditType.REPLACE, 3, 4, 3, 4),
]


class TestMetrics:
    def test_distance(self) -> None:
        assert api.distance("Levenshtein", "Lenvinsten") == 4

    def test_ratio(self) -> None:
        assert api.ratio("Brian", "Jesus") == 0.0

    def test_hamming(self) -> None:
        assert api.hamming("Brian", "Jesus") == 5

    def test_jaro(self) -> None:
        assert api.jaro("Brian", "Jesus") == 0.0

    def test_jaro_winkler_prefix_weight(self) -> None:
        assert api.jaro_winkler("Thorkel", "Thorgier", 0.25) == pytest.approx(1.0)


class TestEditopsDispatch:
    def test_find(self) -> None:
        assert api.editops("spam", "park") == SPAM_PARK_EDITOPS

    def test_convert_opcodes_with_lengths(self) -> None:
        assert api.editops(SPAM_PARK_OPCODES, 4, 4) == SPAM_PARK_EDITOPS

    def test_convert_opcodes_with_sequences(self) -> None:
        assert api.editops(SPAM_PARK_OPCODES, "spam", "park") == SPAM_PARK_EDITOPS

    def test_atomic_input_normalized(self) -> None:
        ops = [*SPAM_PARK_EDITOPS[:1], EditOp(EditType.KEEP, 1, 0), *SPAM_PARK_EDITOPS[1:]]
        assert api.editops(ops, 4, 4) == SPAM_PARK_EDITOPS

    def test_invalid_opcodes_raise(self) -> None:
        with pytest.raises(InvalidEditOpsError) as excinfo:
            api.editops(SPAM_PARK_OPCODES[:-1], 4, 4)
        assert excinfo.value.kind is EditOpError.INCOMPLETE_SPAN

    def test_wrong_arity(self) -> None:
        with pytest.raises(TypeError):
            api.editops("spam")

    def test_negative_length(self) -> None:
        with pytest.raises(InvalidArgumentError):
            api.editops(SPAM_PARK_OPCODES, -1, 4)


class TestOpcodesDispatch:
    def test_find(self) -> None:
        assert api.opcodes("spam", "park") == SPAM_PARK_OPCODES

    def test_convert_editops(self) -> None:
        assert api.opcodes(SPAM_PARK_EDITOPS, 4, 4) == SPAM_PARK_OPCODES

    def test_block_input_copied(self) -> None:
        result = api.opcodes(SPAM_PARK_OPCODES, "spam", "park")
        assert result == SPAM_PARK_OPCODES
        assert result is not SPAM_PARK_OPCODES

    def test_out_of_bounds_editops_raise(self) -> None:
        with pytest.raises(InvalidEditOpsError):
            api.opcodes(SPAM_PARK_EDITOPS, 3, 3)

    def test_wrong_arity(self) -> None:
        with pytest.raises(TypeError):
            api.opcodes("a", "b", "c", "d")


class TestAlgebra:
    def test_inverse_editops(self) -> None:
        assert api.inverse(SPAM_PARK_EDITOPS) == api.editops("park", "spam")

    def test_inverse_opcodes(self) -> None:
        assert api.inverse(SPAM_PARK_OPCODES) == api.opcodes("park", "spam")

    def test_inverse_empty(self) -> None:
        assert api.inverse([]) == []

    def test_apply_editops(self) -> None:
        assert api.apply_edit(SPAM_PARK_EDITOPS, "spam", "park") == "park"

    def test_apply_opcodes(self) -> None:
        assert api.apply_edit(SPAM_PARK_OPCODES, "spam", "park") == "park"

    def test_apply_empty_returns_source(self) -> None:
        assert api.apply_edit([], "spam", "park") == "spam"

    def test_apply_validates(self) -> None:
        with pytest.raises(InvalidEditOpsError):
            api.apply_edit(SPAM_PARK_EDITOPS, "sp", "park")

    def test_matching_blocks_editops(self) -> None:
        assert api.matching_blocks(SPAM_PARK_EDITOPS, "spam", "park") == [
            MatchingBlock(1, 0, 2),
            MatchingBlock(4, 4, 0),
        ]

    def test_matching_blocks_opcodes(self) -> None:
        assert api.matching_blocks(SPAM_PARK_OPCODES, 4, 4) == [
            MatchingBlock(1, 0, 2),
            MatchingBlock(4, 4, 0),
        ]

    def test_subtract_edit(self) -> None:
        e = api.editops("man", "scotsman")
        partial = api.apply_edit(e[:3], "man", "scotsman")
        assert api.apply_edit(api.subtract_edit(e, e[:3]), partial, "scotsman") == "scotsman"

    def test_subtract_rejects_opcodes(self) -> None:
        with pytest.raises(InvalidEditOpsError) as excinfo:
            api.subtract_edit(SPAM_PARK_OPCODES, SPAM_PARK_OPCODES[:1])  # type: ignore[arg-type]
        assert excinfo.value.kind is EditOpError.BAD_KIND

    def test_check_errors(self) -> None:
        assert api.check_errors(SPAM_PARK_EDITOPS, "spam", "park") is EditOpError.OK
        assert api.check_errors(SPAM_PARK_EDITOPS, 2, 2) is EditOpError.OUT_OF_BOUNDS


class TestMedians:
    @pytest.fixture
    def fixme(self) -> list[str]:
        return [
            "Levnhtein",
            "Leveshein",
            "Leenshten",
            "Leveshtei",
            "Lenshtein",
            "Lvenstein",
            "Levenhtin",
            "evenshtei",
        ]

    def test_default_is_greedy(self) -> None:
        assert api.median(["SpSm", "mpamm", "Spam", "Spa", "Sua", "hSam"]) == "Spam"

    def test_quick_method(self, fixme: list[str]) -> None:
        assert api.median(fixme, config=MedianConfig(method=MedianMethod.QUICK)) == "Levnshein"

    def test_set_method_returns_member(self, fixme: list[str]) -> None:
        assert api.median(fixme, config=MedianConfig(method=MedianMethod.SET)) in fixme

    def test_improve_passes_never_worse(self, fixme: list[str]) -> None:
        quick = api.quickmedian(fixme)
        improved = api.median(
            fixme, config=MedianConfig(method=MedianMethod.QUICK, improve_passes=3)
        )
        assert weighted_sod(improved, fixme) <= weighted_sod(quick, fixme)

    def test_accepts_generators(self) -> None:
        assert api.setmedian(s for s in ["a", "a", "b"]) == "a"

    def test_weight_mismatch_raises(self) -> None:
        with pytest.raises(InvalidArgumentError):
            api.median(["a", "b"], [1.0])


class TestSequences:
    def test_seqratio(self) -> None:
        assert api.seqratio(["spam"], ["spam"]) == 1.0

    def test_setratio(self) -> None:
        assert api.setratio(["a", "b"], ["b", "a"]) == 1.0

    def test_compare_sequences(self) -> None:
        result = api.compare_sequences(["spam", "eggs"], ["eggs"], ordered=False)
        assert result.unmatched_left == [0]

    def test_calls_are_stateless(self) -> None:
        first = api.compare_sequences(["a", "b"], ["b"])
        second = api.compare_sequences(["a", "b"], ["b"])
        assert first.similarity_score == second.similarity_score
        assert first.matched_pairs == second.matched_pairs

    def test_list_tokens(self) -> None:
        assert api.seqratio([[1, 2]], [[1, 3]]) == pytest.approx(0.5)
        assert api.setratio([[1, 2], [5]], [[5], [1, 2]]) == 1.0
        result = api.compare_sequences([[1, 2], [3]], [[3]])
        assert result.matched_pairs == [(1, 0)]
