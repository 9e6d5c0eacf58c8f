"""Tests for application/fixes.py."""

import pytest

from memberaccess.application.fixes import apply_edits, collect_edits, validate_edits
from memberaccess.domain.exceptions.fixes import OverlappingEditsError
from memberaccess.domain.model.text_edit import DeleteRange, Insert
from tests.factories import make_violation


class TestCollectEdits:
    """Tests for collect_edits()."""

    def test_skips_unfixable(self) -> None:
        fix = Insert(0, "public ")
        violations = [make_violation(0, fix=fix), make_violation(5)]
        assert collect_edits(violations) == (fix,)


class TestValidateEdits:
    """Tests for validate_edits()."""

    def test_sorts_by_offset(self) -> None:
        edits = [Insert(9, "a"), DeleteRange(0, 3), Insert(4, "b")]
        assert validate_edits(edits) == (DeleteRange(0, 3), Insert(4, "b"), Insert(9, "a"))

    def test_insert_before_delete_at_same_offset(self) -> None:
        edits = [DeleteRange(4, 8), Insert(4, "x")]
        assert validate_edits(edits) == (Insert(4, "x"), DeleteRange(4, 8))

    def test_touching_ranges_allowed(self) -> None:
        assert len(validate_edits([DeleteRange(0, 4), DeleteRange(4, 6)])) == 2

    def test_insert_at_delete_end_allowed(self) -> None:
        assert len(validate_edits([DeleteRange(0, 4), Insert(4, "x")])) == 2

    def test_overlapping_deletes_raise(self) -> None:
        with pytest.raises(OverlappingEditsError):
            validate_edits([DeleteRange(0, 5), DeleteRange(3, 8)])

    def test_insert_inside_delete_raises(self) -> None:
        with pytest.raises(OverlappingEditsError):
            validate_edits([DeleteRange(0, 5), Insert(2, "x")])

    def test_two_inserts_same_offset_raise(self) -> None:
        with pytest.raises(OverlappingEditsError):
            validate_edits([Insert(3, "a"), Insert(3, "b")])


class TestApplyEdits:
    """Tests for apply_edits()."""

    def test_no_edits(self) -> None:
        assert apply_edits("class A {}", []) == "class A {}"

    def test_insert(self) -> None:
        assert apply_edits("class A { foo(); }", [Insert(10, "public ")]) == (
            "class A { public foo(); }"
        )

    def test_delete(self) -> None:
        text = "class A { public foo(); }"
        assert apply_edits(text, [DeleteRange(10, 17)]) == "class A { foo(); }"

    def test_multiple_edits_use_original_offsets(self) -> None:
        text = "class A { a; public b; c; }"
        edits = [Insert(10, "public "), DeleteRange(13, 20), Insert(23, "public ")]
        assert apply_edits(text, edits) == "class A { public a; b; public c; }"

    def test_edit_past_end_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds text"):
            apply_edits("abc", [Insert(4, "x")])

    def test_overlap_raises(self) -> None:
        with pytest.raises(OverlappingEditsError):
            apply_edits("abcdef", [DeleteRange(0, 3), DeleteRange(2, 4)])
