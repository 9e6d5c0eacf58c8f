"""Tests for domain/model/location.py."""

from pathlib import Path

import pytest

from memberaccess.domain.model.location import Location


class TestLocationCreation:
    """Tests for valid Location creation."""

    def test_minimal_valid(self) -> None:
        loc = Location(file=Path("app.ts"), line=1, column=0)
        assert loc.file == Path("app.ts")
        assert loc.line == 1
        assert loc.column == 0

    def test_is_frozen(self) -> None:
        loc = Location(file=Path("app.ts"), line=1, column=0)
        with pytest.raises(AttributeError):
            loc.line = 2  # type: ignore[misc]


class TestLocationFailFirst:
    """Tests for FAIL-FIRST validation in Location."""

    def test_none_file_raises(self) -> None:
        with pytest.raises(TypeError, match="file must not be None"):
            Location(file=None, line=1, column=0)  # type: ignore[arg-type]

    def test_line_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="line must be > 0"):
            Location(file=Path("app.ts"), line=0, column=0)

    def test_column_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="column must be >= 0"):
            Location(file=Path("app.ts"), line=1, column=-1)


class TestLocationStr:
    """Tests for Location.__str__."""

    def test_str_format(self) -> None:
        loc = Location(file=Path("app.ts"), line=42, column=10)
        assert str(loc) == "app.ts:42:10"
