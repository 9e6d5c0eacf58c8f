"""Internal analyzer exceptions."""

from memberaccess.domain.exceptions.base import MemberAccessError


class UnhandledNodeKindError(MemberAccessError):
    """Role lookup reached a node kind the eligibility filter should reject.

    Signals an analyzer bug or a parser contract mismatch.
    Never expected from valid input.

    Attributes:
        kind: Name of the unexpected node kind
    """

    def __init__(self, kind: str) -> None:
        if not kind:
            raise ValueError("kind must not be empty")

        self.kind = kind
        super().__init__(f"unhandled node type {kind}")
