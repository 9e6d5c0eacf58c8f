"""Tests for application/options.py."""

import logging

import pytest

from memberaccess.application.options import (
    KNOWN_OPTIONS,
    OPTION_DESCRIPTIONS,
    resolve_options,
)
from memberaccess.domain.exceptions.configuration import ConfigurationConflictError
from memberaccess.domain.model.configuration import MemberAccessConfig


class TestResolveDefaults:
    """Tests for token-free and individual-option resolution."""

    def test_no_tokens(self) -> None:
        assert resolve_options([]) == MemberAccessConfig()

    def test_individual_checks(self) -> None:
        config = resolve_options(["check-accessor", "check-constructor"])
        assert config.check_accessors
        assert config.check_constructors
        assert not config.check_parameter_properties
        assert config.require_explicit_visibility

    def test_check_parameter_property(self) -> None:
        assert resolve_options(["check-parameter-property"]).check_parameter_properties

    def test_order_and_duplicates_irrelevant(self) -> None:
        a = resolve_options(["check-accessor", "ignore-angular-lifecycle", "check-accessor"])
        b = resolve_options(("ignore-angular-lifecycle", "check-accessor"))
        assert a == b

    def test_unknown_tokens_ignored(self) -> None:
        assert resolve_options(["no-such-option", "check-accessor"]) == resolve_options(
            ["check-accessor"]
        )

    def test_unknown_tokens_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="memberaccess.application.options"):
            resolve_options(["whatever"])
        assert "whatever" in caplog.text


class TestNoPublic:
    """Tests for the no-public option."""

    def test_no_public_implies_all_checks(self) -> None:
        config = resolve_options(["no-public"])
        assert config.forbid_default_visibility
        assert config.check_accessors
        assert config.check_constructors
        assert config.check_parameter_properties
        assert config.enabled

    def test_lifecycle_independent(self) -> None:
        assert resolve_options(["no-public", "ignore-angular-lifecycle"]).ignore_lifecycle_names
        assert resolve_options(["ignore-angular-lifecycle"]).ignore_lifecycle_names


class TestConflict:
    """Tests for no-public combined with a check-* option."""

    @pytest.mark.parametrize(
        "check", ["check-accessor", "check-constructor", "check-parameter-property"]
    )
    def test_conflict_disables_rule(self, check: str) -> None:
        config = resolve_options(["no-public", check])
        assert not config.enabled

    def test_conflict_keeps_lifecycle_flag(self) -> None:
        config = resolve_options(["no-public", "check-accessor", "ignore-angular-lifecycle"])
        assert config == MemberAccessConfig.disabled(ignore_lifecycle_names=True)

    def test_conflict_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="memberaccess.application.options"):
            resolve_options(["no-public", "check-accessor"])
        assert "disabled" in caplog.text

    def test_strict_conflict_raises(self) -> None:
        with pytest.raises(ConfigurationConflictError) as exc_info:
            resolve_options(["no-public", "check-constructor", "check-accessor"], strict=True)
        assert exc_info.value.tokens == ("check-accessor", "check-constructor", "no-public")

    def test_strict_without_conflict_resolves(self) -> None:
        assert resolve_options(["no-public"], strict=True).forbid_default_visibility


class TestOptionMetadata:
    """Tests for option metadata."""

    def test_every_option_described(self) -> None:
        assert set(OPTION_DESCRIPTIONS) == KNOWN_OPTIONS
