"""Tests for domain/exceptions/parsing.py."""

from pathlib import Path

import pytest

from memberaccess.domain.exceptions.base import MemberAccessError
from memberaccess.domain.exceptions.parsing import ParsingError


class TestParsingError:
    """Tests for ParsingError exception."""

    def test_has_attributes(self) -> None:
        err = ParsingError(Path("app.ts"), "file not found")
        assert err.path == Path("app.ts")
        assert err.reason == "file not found"

    def test_message_format(self) -> None:
        err = ParsingError(Path("app.ts"), "permission denied")
        assert str(err) == "Failed to parse app.ts: permission denied"

    def test_can_catch_as_root_error(self) -> None:
        with pytest.raises(MemberAccessError):
            raise ParsingError(Path("app.ts"), "error")

    def test_none_path_raises(self) -> None:
        with pytest.raises(TypeError, match="path must not be None"):
            ParsingError(None, "error")  # type: ignore[arg-type]

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            ParsingError(Path("app.ts"), "")
