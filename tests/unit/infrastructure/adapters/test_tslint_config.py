"""Tests for infrastructure/adapters/tslint_config.py."""

import json
from pathlib import Path

import pytest

from memberaccess.domain.exceptions.configuration import ConfigurationError
from memberaccess.domain.model.enums import Severity
from memberaccess.infrastructure.adapters.tslint_config import (
    RuleSettings,
    TslintConfigLoader,
    strip_comments,
)


@pytest.fixture
def loader() -> TslintConfigLoader:
    return TslintConfigLoader()


class TestFromMapping:
    """Tests for TslintConfigLoader.from_mapping()."""

    def test_missing_entry_is_off(self, loader: TslintConfigLoader) -> None:
        assert loader.from_mapping({"rules": {}}) == RuleSettings.off()
        assert loader.from_mapping({}) == RuleSettings.off()

    def test_boolean_entry(self, loader: TslintConfigLoader) -> None:
        assert loader.from_mapping({"rules": {"member-access": True}}) == RuleSettings(True)
        assert loader.from_mapping({"rules": {"member-access": False}}) == RuleSettings(False)

    def test_array_entry(self, loader: TslintConfigLoader) -> None:
        data = {"rules": {"member-access": [True, "no-public", "check-accessor"]}}
        settings = loader.from_mapping(data)
        assert settings.enabled
        assert settings.tokens == ("no-public", "check-accessor")
        assert settings.severity is Severity.ERROR

    def test_object_entry(self, loader: TslintConfigLoader) -> None:
        data = {"rules": {"member-access": {"severity": "warning", "options": ["no-public"]}}}
        settings = loader.from_mapping(data)
        assert settings == RuleSettings(True, ("no-public",), Severity.WARNING)

    def test_object_entry_single_option(self, loader: TslintConfigLoader) -> None:
        data = {"rules": {"member-access": {"options": "check-constructor"}}}
        assert loader.from_mapping(data).tokens == ("check-constructor",)

    def test_object_entry_severity_off(self, loader: TslintConfigLoader) -> None:
        data = {"rules": {"member-access": {"severity": "off"}}}
        assert not loader.from_mapping(data).enabled

    def test_custom_rule_name(self) -> None:
        loader = TslintConfigLoader(rule_name="custom-access")
        assert loader.from_mapping({"rules": {"custom-access": True}}).enabled


class TestFromMappingFailFirst:
    """Malformed entries raise ConfigurationError."""

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"rules": []},
            {"rules": {"member-access": "yes"}},
            {"rules": {"member-access": [True, 3]}},
            {"rules": {"member-access": {"severity": "fatal"}}},
        ],
    )
    def test_malformed(self, loader: TslintConfigLoader, data: object) -> None:
        with pytest.raises(ConfigurationError):
            loader.from_mapping(data, source="tslint.json")

    def test_empty_rule_name_raises(self) -> None:
        with pytest.raises(ValueError, match="rule_name"):
            TslintConfigLoader(rule_name="")


class TestLoad:
    """Tests for TslintConfigLoader.load()."""

    def test_load_file(self, loader: TslintConfigLoader, tmp_path: Path) -> None:
        path = tmp_path / "tslint.json"
        path.write_text(json.dumps({"rules": {"member-access": [True, "no-public"]}}))

        assert loader.load(path).tokens == ("no-public",)

    def test_missing_file_raises(self, loader: TslintConfigLoader, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="cannot read file"):
            loader.load(tmp_path / "missing.json")

    def test_invalid_json_raises(self, loader: TslintConfigLoader, tmp_path: Path) -> None:
        path = tmp_path / "tslint.json"
        path.write_text("{rules:")
        with pytest.raises(ConfigurationError, match="invalid JSON"):
            loader.load(path)

    def test_comments_allowed(self, loader: TslintConfigLoader, tmp_path: Path) -> None:
        path = tmp_path / "tslint.json"
        path.write_text(
            "{\n"
            "  // rule settings\n"
            '  "rules": {\n'
            '    /* visibility */ "member-access": [true, "check-accessor"]\n'
            "  }\n"
            "}\n"
        )

        assert loader.load(path).tokens == ("check-accessor",)


class TestStripComments:
    """Tests for strip_comments()."""

    def test_line_and_block_comments_removed(self) -> None:
        text = '{"a": 1, // trailing\n/* block\nspanning */ "b": 2}'
        assert json.loads(strip_comments(text)) == {"a": 1, "b": 2}

    def test_markers_inside_strings_kept(self) -> None:
        text = '{"url": "http://example.com/*x*/", "q": "say \\"//\\""}'
        assert strip_comments(text) == text
