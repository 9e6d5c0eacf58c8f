"""tslint.json loader for the member-access rule entry.

Supported rule shapes:
    "member-access": true
    "member-access": [true, "no-public", "check-accessor"]
    "member-access": {"severity": "warning", "options": ["no-public"]}

Comments (`//` and `/* */`) are accepted as tslint accepts them.
Rule-set inheritance ("extends") is not followed.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from memberaccess.application.analyzers.visibility import RULE_NAME
from memberaccess.domain.exceptions.configuration import ConfigurationError
from memberaccess.domain.model.enums import Severity

logger = logging.getLogger(__name__)

_SEVERITIES: dict[str, Severity | None] = {
    "default": Severity.ERROR,
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "off": None,
    "none": None,
}

# Strings are matched first so comment markers inside them survive.
_COMMENT_OR_STRING = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/', re.DOTALL)


@dataclass(frozen=True, slots=True)
class RuleSettings:
    """member-access entry of a tslint configuration.

    Attributes:
        enabled: False when the rule is absent, false, or severity "off"
        tokens: Option tokens in file order
        severity: Severity for reported violations
    """

    enabled: bool
    tokens: tuple[str, ...] = ()
    severity: Severity = Severity.ERROR

    @classmethod
    def off(cls) -> RuleSettings:
        """Settings for a rule that is not configured."""
        return cls(enabled=False)


class TslintConfigLoader:
    """Reads the member-access rule entry from tslint.json.

    Stateless: every load() reads the file again.
    """

    def __init__(self, rule_name: str = RULE_NAME) -> None:
        if not rule_name:
            raise ValueError("rule_name must not be empty")
        self._rule_name = rule_name

    def load(self, path: Path) -> RuleSettings:
        """Load rule settings from a tslint.json file.

        Raises:
            ConfigurationError: If the file is unreadable or the entry malformed
        """
        try:
            data = json.loads(strip_comments(path.read_text(encoding="utf-8")))
        except OSError as e:
            raise ConfigurationError(str(path), f"cannot read file: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(str(path), f"invalid JSON: {e}") from e

        return self.from_mapping(data, source=str(path))

    def from_mapping(self, data: object, *, source: str = "<mapping>") -> RuleSettings:
        """Extract rule settings from parsed tslint configuration.

        Raises:
            ConfigurationError: If the entry is malformed
        """
        if not isinstance(data, dict):
            raise ConfigurationError(source, "top level must be an object")

        rules = data.get("rules", {})
        if not isinstance(rules, dict):
            raise ConfigurationError(source, "'rules' must be an object")

        if self._rule_name not in rules:
            logger.debug("%s: no '%s' entry", source, self._rule_name)
            return RuleSettings.off()

        return self._parse_entry(rules[self._rule_name], source)

    def _parse_entry(self, entry: object, source: str) -> RuleSettings:
        match entry:
            case bool(enabled):
                return RuleSettings(enabled=enabled)
            case [bool(enabled), *tokens]:
                return RuleSettings(enabled=enabled, tokens=self._tokens(tokens, source))
            case {**fields}:
                severity = self._severity(fields.get("severity", "default"), source)
                tokens = fields.get("options", ())
                if isinstance(tokens, bool):
                    tokens = ()
                elif not isinstance(tokens, list | tuple):
                    tokens = (tokens,)
                if severity is None:
                    return RuleSettings(enabled=False, tokens=self._tokens(tokens, source))
                return RuleSettings(
                    enabled=True,
                    tokens=self._tokens(tokens, source),
                    severity=severity,
                )
            case _:
                raise ConfigurationError(
                    source, f"'{self._rule_name}' must be a boolean, an array or an object"
                )

    def _tokens(self, tokens: Iterable[object], source: str) -> tuple[str, ...]:
        result: list[str] = []
        for token in tokens:
            if not isinstance(token, str):
                raise ConfigurationError(source, f"option {token!r} is not a string")
            result.append(token)
        return tuple(result)

    def _severity(self, value: object, source: str) -> Severity | None:
        if not isinstance(value, str) or value.lower() not in _SEVERITIES:
            raise ConfigurationError(source, f"unknown severity {value!r}")
        return _SEVERITIES[value.lower()]


def strip_comments(text: str) -> str:
    """Remove JavaScript-style comments from JSON text, leaving strings intact."""
    return _COMMENT_OR_STRING.sub(lambda m: m.group() if m.group().startswith('"') else " ", text)
