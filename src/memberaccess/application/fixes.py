"""Fix application: offset-addressed edits → patched text.

Edits from one analysis pass are disjoint by construction. They are
still validated before application; any collision aborts the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from memberaccess.domain.exceptions.fixes import OverlappingEditsError
from memberaccess.domain.model.text_edit import DeleteRange, Insert, TextEdit
from memberaccess.domain.model.violation import Violation

logger = logging.getLogger(__name__)


def collect_edits(violations: Iterable[Violation]) -> tuple[TextEdit, ...]:
    """Extract fixes from violations, skipping unfixable ones."""
    return tuple(v.fix for v in violations if v.fix is not None)


def validate_edits(edits: Iterable[TextEdit]) -> tuple[TextEdit, ...]:
    """Sort edits by offset and verify they do not overlap.

    Two inserts at the same offset collide (their order would be ambiguous),
    as does an insert strictly inside a deleted range. Touching ranges are fine.

    Args:
        edits: Edits in any order

    Returns:
        Edits sorted by start offset

    Raises:
        OverlappingEditsError: On the first colliding pair
    """
    ordered = sorted(edits, key=_sort_key)

    for previous, current in zip(ordered, ordered[1:], strict=False):
        if _collide(previous, current):
            raise OverlappingEditsError(previous, current)

    return tuple(ordered)


def apply_edits(text: str, edits: Iterable[TextEdit]) -> str:
    """Apply edits to text, highest offset first.

    Args:
        text: Original source text
        edits: Edits computed against text

    Returns:
        Patched text

    Raises:
        OverlappingEditsError: If edits collide
        ValueError: If an edit points past the end of text
    """
    ordered = validate_edits(edits)
    if ordered and ordered[-1].span.end > len(text):
        raise ValueError(f"edit {ordered[-1]} exceeds text of length {len(text)}")

    for edit in reversed(ordered):
        match edit:
            case Insert(offset=offset, text=inserted):
                text = text[:offset] + inserted + text[offset:]
            case DeleteRange(start=start, end=end):
                text = text[:start] + text[end:]

    logger.debug("Applied %d edit(s)", len(ordered))
    return text


def _sort_key(edit: TextEdit) -> tuple[int, int]:
    # inserts sort before a deletion starting at the same offset
    return (edit.span.start, 0 if isinstance(edit, Insert) else 1)


def _collide(previous: TextEdit, current: TextEdit) -> bool:
    match (previous, current):
        case (Insert(), Insert()):
            return previous.span.start == current.span.start
        case (DeleteRange(), _):
            return current.span.start < previous.span.end
        case _:
            return False
