"""Visibility analyzer: flags class members without explicit visibility.

Two mutually exclusive modes, chosen by MemberAccessConfig:
- require-explicit: members lacking public/protected/private are flagged,
  fix inserts `public ` after any decorators.
- forbid-default: an explicit `public` is flagged as redundant,
  fix deletes the keyword and the whitespace after it.

Explicit protected/private always satisfies either mode.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterator
from typing import TYPE_CHECKING, Self

from memberaccess.domain.exceptions.analysis import UnhandledNodeKindError
from memberaccess.domain.model.enums import Keyword, MemberRole
from memberaccess.domain.model.syntax import (
    ClassLike,
    Constructor,
    GetAccessor,
    Method,
    Parameter,
    Property,
    SetAccessor,
)
from memberaccess.domain.model.text_edit import DeleteRange, Insert
from memberaccess.domain.model.violation import Violation

if TYPE_CHECKING:
    from memberaccess.domain.model.configuration import MemberAccessConfig
    from memberaccess.domain.model.span import Span
    from memberaccess.domain.model.syntax import Member, SyntaxNode

RULE_NAME = "member-access"
RULE_DESCRIPTION = "Requires explicit visibility declarations for class members."
RULE_RATIONALE = (
    "Explicit visibility declarations can make code more readable and accessible "
    "for those new to TypeScript. Members lacking a visibility declaration may be "
    "an indication of an accidental leak of class internals."
)

FAILURE_STRING_NO_PUBLIC = "'public' is implicit."

ANGULAR_LIFECYCLE_HOOKS: frozenset[str] = frozenset(
    {
        "ngOnChanges",
        "ngOnInit",
        "ngDoCheck",
        "ngAfterContentInit",
        "ngAfterContentChecked",
        "ngAfterViewInit",
        "ngAfterViewChecked",
        "ngOnDestroy",
    }
)

_PUBLIC_INSERTION = "public "


def failure_message(role: MemberRole, member_name: str | None) -> str:
    """Build the require-explicit violation message.

    Args:
        role: Syntactic role of the member
        member_name: Identifier name, omitted from the message when None

    Returns:
        Message text
    """
    quoted = "" if member_name is None else f" '{member_name}'"
    return f"The {role.value}{quoted} must be marked either 'private', 'public', or 'protected'"


def role_of(node: SyntaxNode) -> MemberRole:
    """Map a member node to its role.

    Raises:
        UnhandledNodeKindError: For nodes that are never candidates
    """
    match node:
        case Constructor():
            return MemberRole.CONSTRUCTOR
        case Method():
            return MemberRole.METHOD
        case Property():
            return MemberRole.PROPERTY
        case GetAccessor():
            return MemberRole.GET_ACCESSOR
        case SetAccessor():
            return MemberRole.SET_ACCESSOR
        case Parameter():
            return MemberRole.PARAMETER_PROPERTY
        case _:
            raise UnhandledNodeKindError(node.kind.name)


def should_check(node: SyntaxNode, config: MemberAccessConfig) -> bool:
    """Check if a class member is a candidate under config.

    Parameter properties are not class members; they go through
    the constructor parameter loop instead.
    """
    match node:
        case Constructor():
            return config.check_constructors
        case GetAccessor() | SetAccessor():
            return config.check_accessors
        case Method() | Property():
            return True
        case _:
            return False


def check_member(node: Member, config: MemberAccessConfig) -> Violation | None:
    """Apply the visibility policy to one candidate.

    Args:
        node: Candidate member
        config: Resolved configuration

    Returns:
        Violation, or None if the member satisfies the policy
    """
    if node.has_modifier(Keyword.PROTECTED, Keyword.PRIVATE):
        return None

    public = node.modifier(Keyword.PUBLIC)

    if config.forbid_default_visibility:
        if public is None:
            return None
        # public is not optional on a parameter property without readonly
        if isinstance(node, Parameter) and not node.has_modifier(Keyword.READONLY):
            return None
        return Violation(
            span=public.span,
            message=FAILURE_STRING_NO_PUBLIC,
            role=role_of(node),
            member_name=node.identifier,
            fix=DeleteRange(public.span.start, public.next_token_start),
            rule_name=RULE_NAME,
        )

    if public is not None:
        return None

    member_name = node.identifier
    if config.ignore_lifecycle_names and member_name in ANGULAR_LIFECYCLE_HOOKS:
        return None

    role = role_of(node)
    return Violation(
        span=_report_span(node),
        message=failure_message(role, member_name),
        role=role,
        member_name=member_name,
        fix=Insert(node.declaration_start, _PUBLIC_INSERTION),
        rule_name=RULE_NAME,
    )


def _report_span(node: Member) -> Span:
    """Span to report a missing visibility at: keyword, name, or whole node."""
    if isinstance(node, Constructor):
        return node.keyword
    if node.name is not None:
        return node.name.span
    return node.span


class ViolationStream:
    """Lazy, restartable sequence of violations for one tree.

    Each iteration performs a fresh depth-first traversal.
    Violations come out sorted by start offset.
    """

    __slots__ = ("_root", "_config")

    def __init__(self, root: SyntaxNode, config: MemberAccessConfig) -> None:
        if root is None:
            raise TypeError("root must not be None")
        if config is None:
            raise TypeError("config must not be None")
        self._root = root
        self._config = config

    def __iter__(self) -> Iterator[Violation]:
        if not self._config.enabled:
            return iter(())
        return _walk(self._root, self._config)


def _walk(node: SyntaxNode, config: MemberAccessConfig) -> Iterator[Violation]:
    """Pre-order traversal yielding violations in source order.

    A member's own violations are merged by offset with those of the
    class-likes nested inside it, since a class in a decorator or in a
    parameter default can precede a violation of the member itself.
    """
    match node:
        case ClassLike(members=members, children=children):
            for child in children:
                yield from _walk(child, config)
            for member in members:
                yield from heapq.merge(
                    _check_class_element(member, config),
                    _walk(member, config),
                    key=_start,
                )
        case Constructor(parameters=parameters, children=children):
            for parameter in parameters:
                yield from _walk(parameter, config)
            for child in children:
                yield from _walk(child, config)
        case _:
            for child in node.children:
                yield from _walk(child, config)


def _check_class_element(member: SyntaxNode, config: MemberAccessConfig) -> Iterator[Violation]:
    """Check a class element and, for constructors, its parameter properties."""
    if should_check(member, config):
        violation = check_member(member, config)  # type: ignore[arg-type]
        if violation is not None:
            yield violation

    if config.check_parameter_properties and isinstance(member, Constructor) and member.has_body:
        for parameter in member.parameters:
            if parameter.is_parameter_property:
                violation = check_member(parameter, config)
                if violation is not None:
                    yield violation


def _start(violation: Violation) -> int:
    return violation.start


def analyze(root: SyntaxNode, config: MemberAccessConfig) -> ViolationStream:
    """Analyze a syntax tree for member visibility violations.

    Args:
        root: Root of the syntax tree (usually the source file node)
        config: Resolved configuration

    Returns:
        Restartable stream of violations in ascending offset order
    """
    return ViolationStream(root, config)


class VisibilityAnalyzer:
    """Stateless member-access analyzer bound to one configuration.

    Factory method from_config() returns None when the configuration
    disables the rule.
    """

    def __init__(self, config: MemberAccessConfig) -> None:
        if config is None:
            raise TypeError("config must not be None")
        self._config = config

    @property
    def config(self) -> MemberAccessConfig:
        """Configuration used by analyze()."""
        return self._config

    def analyze(self, root: SyntaxNode) -> tuple[Violation, ...]:
        """Analyze tree and materialize the violations."""
        return tuple(analyze(root, self._config))

    @classmethod
    def from_config(cls, config: MemberAccessConfig) -> Self | None:
        """Create analyzer, or None if config disables the rule."""
        if not config.enabled:
            return None
        return cls(config)
