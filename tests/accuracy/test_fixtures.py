"""Accuracy tests: documented examples and properties over a word corpus.

The literal scenarios are the documented behaviour of the classic
python-Levenshtein functions, which levkit reproduces exactly.  The
property checks run every pair of a fixed corpus through the metrics and
the edit algebra.
"""

from __future__ import annotations

import itertools

import pytest

import levkit
from levkit import EditOp, EditType, MatchingBlock, OpCode

FIXME = [
    "Levnhtein",
    "Leveshein",
    "Leenshten",
    "Leveshtei",
    "Lenshtein",
    "Lvenstein",
    "Levenhtin",
    "evenshtei",
]

CORPUS = [
    "",
    "a",
    "spam",
    "park",
    "spark",
    "Levenshtein",
    "Lenvinsten",
    "Levensthein",
    "Thorkel",
    "Thorgier",
    "dog kennels",
    "mattresses",
]
PAIRS = list(itertools.product(CORPUS, repeat=2))


# ---------------------------------------------------------------------------
# Documented examples
# ---------------------------------------------------------------------------


class TestDocumentedExamples:
    @pytest.mark.parametrize(
        ("b", "expected"),
        [("Lenvinsten", 4), ("Levensthein", 2), ("Levenshten", 1), ("Levenshtein", 0)],
    )
    def test_distance(self, b: str, expected: int) -> None:
        assert levkit.distance("Levenshtein", b) == expected

    def test_ratio(self) -> None:
        assert round(levkit.ratio("Hello world!", "Holly grail!"), 4) == 0.5833
        assert levkit.ratio("Brian", "Jesus") == 0.0

    def test_hamming(self) -> None:
        assert levkit.hamming("Hello world!", "Holly grail!") == 7
        assert levkit.hamming("Brian", "Jesus") == 5

    def test_jaro(self) -> None:
        assert levkit.jaro("Brian", "Jesus") == 0.0
        assert round(levkit.jaro("Thorkel", "Thorgier"), 4) == 0.7798
        assert round(levkit.jaro("Dinsdale", "D"), 4) == 0.7083

    def test_jaro_winkler(self) -> None:
        assert levkit.jaro_winkler("Brian", "Jesus") == 0.0
        assert round(levkit.jaro_winkler("Thorkel", "Thorgier"), 4) == 0.8679
        assert round(levkit.jaro_winkler("Dinsdale", "D"), 4) == 0.7375
        assert levkit.jaro_winkler("Thorkel", "Thorgier", 0.25) == pytest.approx(1.0)

    def test_median(self) -> None:
        assert levkit.median(["SpSm", "mpamm", "Spam", "Spa", "Sua", "hSam"]) == "Spam"
        assert levkit.median(FIXME) == "Levenshtein"

    def test_median_improve(self) -> None:
        once = levkit.median_improve("spam", FIXME)
        assert once == "enhtein"
        assert levkit.median_improve(once, FIXME) == "Levenshtein"

    def test_quickmedian(self) -> None:
        assert levkit.quickmedian(FIXME) == "Levnshein"

    def test_setmedian(self) -> None:
        strings = ["ehee", "cceaes", "chees", "chreesc", "chees", "cheesee", "cseese", "chetese"]
        assert levkit.setmedian(strings) == "chees"

    def test_seqratio(self) -> None:
        a = ["newspaper", "litter bin", "tinny", "antelope"]
        b = ["caribou", "sausage", "gorn", "woody"]
        assert round(levkit.seqratio(a, b), 4) == 0.2152
        assert levkit.seqratio([], ["foobar"]) == 0.0
        assert levkit.seqratio(["foobar"], []) == 0.0

    def test_setratio(self) -> None:
        a = ["newspaper", "litter bin", "tinny", "antelope"]
        b = ["caribou", "sausage", "gorn", "woody"]
        assert round(levkit.setratio(a, b), 4) == 0.2818
        assert levkit.setratio([], ["foobar"]) == 0.0
        assert levkit.setratio(["foobar"], []) == 0.0

    def test_editops(self) -> None:
        assert levkit.editops("spam", "park") == [
            EditOp(EditType.DELETE, 0, 0),
            EditOp(EditType.INSERT, 3, 2),
            EditOp(EditType.REPLACE, 3, 3),
        ]

    def test_opcodes(self) -> None:
        assert levkit.opcodes("spam", "park") == [
            OpCode(EditType.DELETE, 0, 1, 0, 0),
            OpCode(EditType.KEEP, 1, 3, 0, 2),
            OpCode(EditType.INSERT, 3, 3, 2, 3),
            OpCode(EditType.REPLACE, 3, 4, 3, 4),
        ]

    def test_inverse(self) -> None:
        assert levkit.inverse(levkit.editops("spam", "park")) == [
            EditOp(EditType.INSERT, 0, 0),
            EditOp(EditType.DELETE, 2, 3),
            EditOp(EditType.REPLACE, 3, 3),
        ]
        assert levkit.inverse(levkit.editops("spam", "park")) == levkit.editops("park", "spam")

    def test_matching_blocks(self) -> None:
        a, b = "spam", "park"
        assert levkit.matching_blocks(levkit.editops(a, b), a, b) == [
            MatchingBlock(1, 0, 2),
            MatchingBlock(4, 4, 0),
        ]
        assert levkit.matching_blocks(levkit.editops(a, b), len(a), len(b)) == [
            MatchingBlock(1, 0, 2),
            MatchingBlock(4, 4, 0),
        ]

    def test_matching_blocks_text(self) -> None:
        a, b = "dog kennels", "mattresses"
        mb = levkit.matching_blocks(levkit.editops(a, b), a, b)
        assert "".join(a[x.source_pos : x.source_pos + x.length] for x in mb) == "ees"

    def test_apply_edit(self) -> None:
        e = levkit.editops("man", "scotsman")
        e1 = e[:3]
        bastard = levkit.apply_edit(e1, "man", "scotsman")
        assert bastard == "scoman"
        e2 = levkit.subtract_edit(e, e1)
        assert levkit.apply_edit(e2, bastard, "scotsman") == "scotsman"


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestMetricProperties:
    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_distance_symmetric_and_bounded(self, a: str, b: str) -> None:
        d = levkit.distance(a, b)
        assert d == levkit.distance(b, a)
        assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))
        assert (d == 0) == (a == b)

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_similarities_in_unit_interval(self, a: str, b: str) -> None:
        for value in (levkit.ratio(a, b), levkit.jaro(a, b), levkit.jaro_winkler(a, b)):
            assert 0.0 <= value <= 1.0

    @pytest.mark.parametrize(("a", "b", "c"), list(itertools.combinations(CORPUS, 3)))
    def test_triangle_inequality(self, a: str, b: str, c: str) -> None:
        assert levkit.distance(a, c) <= levkit.distance(a, b) + levkit.distance(b, c)


class TestEditProperties:
    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_editops_minimal_and_complete(self, a: str, b: str) -> None:
        ops = levkit.editops(a, b)
        assert len(ops) == levkit.distance(a, b)
        assert levkit.apply_edit(ops, a, b) == b
        assert levkit.check_errors(ops, a, b) is levkit.EditOpError.OK

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_inverse_applies_backwards(self, a: str, b: str) -> None:
        ops = levkit.opcodes(a, b)
        assert levkit.apply_edit(levkit.inverse(ops), b, a) == a

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_matching_blocks_cover_kept_symbols(self, a: str, b: str) -> None:
        blocks = levkit.matching_blocks(levkit.editops(a, b), a, b)
        assert blocks[-1] == MatchingBlock(len(a), len(b), 0)
        kept = sum(block.length for block in blocks)
        replaced = sum(
            1 for op in levkit.editops(a, b) if op.kind in (EditType.REPLACE, EditType.DELETE)
        )
        assert kept + replaced == len(a)

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_subtract_completes_partial_edit(self, a: str, b: str) -> None:
        ops = levkit.editops(a, b)
        applied = ops[::2]
        partial = levkit.apply_edit(applied, a, b)
        rest = levkit.subtract_edit(ops, applied)
        assert levkit.apply_edit(rest, partial, b) == b


class TestMedianProperties:
    @pytest.mark.parametrize("size", [2, 3, 5])
    def test_setmedian_is_member(self, size: int) -> None:
        strings = CORPUS[1 : 1 + size]
        assert levkit.setmedian(strings) in strings

    @pytest.mark.parametrize("candidate", ["", "spam", "Lenvinsten", "zzz"])
    def test_median_improve_never_worse(self, candidate: str) -> None:
        from levkit.algorithm.median import weighted_sod

        improved = levkit.median_improve(candidate, FIXME)
        assert weighted_sod(improved, FIXME) <= weighted_sod(candidate, FIXME)
