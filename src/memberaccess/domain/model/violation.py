"""Rule violation entity."""

from __future__ import annotations

from dataclasses import dataclass

from memberaccess.domain.model.enums import MemberRole, Severity
from memberaccess.domain.model.span import Span
from memberaccess.domain.model.text_edit import TextEdit


@dataclass(frozen=True, slots=True)
class Violation:
    """Member visibility violation.

    Attributes:
        span: Offsets of the offending token
        message: Human-readable message
        role: Syntactic role of the member
        member_name: Identifier name, None for anonymous/computed members
        fix: Proposed edit, None if not fixable
        rule_name: Name of violated rule
        severity: ERROR/WARNING
    """

    span: Span
    message: str
    role: MemberRole
    member_name: str | None = None
    fix: TextEdit | None = None
    rule_name: str = "member-access"
    severity: Severity = Severity.ERROR

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.span is None:
            raise TypeError("span must not be None")
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.rule_name:
            raise ValueError("rule_name must not be empty")
        if self.member_name == "":
            raise ValueError("member_name must be non-empty string or None")

    @property
    def start(self) -> int:
        """Start offset, used for ordering."""
        return self.span.start

    @property
    def fixable(self) -> bool:
        """Check if violation carries a fix."""
        return self.fix is not None

    def __str__(self) -> str:
        """Format violation for display."""
        return f"[{self.severity.name}] {self.rule_name} {self.span}: {self.message}"
