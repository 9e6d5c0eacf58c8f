"""Fix application exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from memberaccess.domain.exceptions.base import MemberAccessError

if TYPE_CHECKING:
    from memberaccess.domain.model.text_edit import TextEdit


class OverlappingEditsError(MemberAccessError):
    """Two text edits touch the same region of source.

    Attributes:
        first: Edit with the lower start offset
        second: Edit that collides with it
    """

    def __init__(self, first: TextEdit, second: TextEdit) -> None:
        if first is None or second is None:
            raise TypeError("edits must not be None")

        self.first = first
        self.second = second
        super().__init__(f"Overlapping edits: {first} and {second}")
