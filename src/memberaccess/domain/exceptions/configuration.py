"""Configuration exceptions."""

from __future__ import annotations

from collections.abc import Iterable

from memberaccess.domain.exceptions.base import MemberAccessError


class ConfigurationError(MemberAccessError):
    """Malformed rule configuration.

    Attributes:
        source: Where the configuration came from (file path, "cli", ...)
        reason: Why the configuration is invalid
    """

    def __init__(self, source: str, reason: str) -> None:
        if not source:
            raise ValueError("source must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration in {source}: {reason}")


class ConfigurationConflictError(MemberAccessError):
    """Option tokens that contradict each other.

    Raised only by strict option resolution. Lenient resolution
    disables the rule instead.

    Attributes:
        tokens: Conflicting tokens, sorted
    """

    def __init__(self, tokens: Iterable[str]) -> None:
        conflicting = tuple(sorted(tokens))
        if len(conflicting) < 2:
            raise ValueError("a conflict needs at least two tokens")

        self.tokens = conflicting
        super().__init__(f"Conflicting member-access options: {', '.join(conflicting)}")
