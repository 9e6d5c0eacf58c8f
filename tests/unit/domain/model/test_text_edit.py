"""Tests for domain/model/text_edit.py."""

import pytest

from memberaccess.domain.model.span import Span
from memberaccess.domain.model.text_edit import DeleteRange, Insert


class TestInsert:
    """Tests for Insert."""

    def test_span_is_empty(self) -> None:
        assert Insert(4, "public ").span == Span(4, 4)

    def test_str(self) -> None:
        assert str(Insert(4, "public ")) == "insert 'public ' at 4"

    def test_negative_offset_raises(self) -> None:
        with pytest.raises(ValueError, match="offset must be >= 0"):
            Insert(-1, "x")

    def test_empty_text_raises(self) -> None:
        with pytest.raises(ValueError, match="text must not be empty"):
            Insert(0, "")


class TestDeleteRange:
    """Tests for DeleteRange."""

    def test_span(self) -> None:
        assert DeleteRange(2, 9).span == Span(2, 9)

    def test_str(self) -> None:
        assert str(DeleteRange(2, 9)) == "delete [2, 9)"

    def test_empty_range_raises(self) -> None:
        with pytest.raises(ValueError, match="must be > start"):
            DeleteRange(3, 3)

    def test_negative_start_raises(self) -> None:
        with pytest.raises(ValueError, match="start must be >= 0"):
            DeleteRange(-2, 3)
