"""Syntax tree model consumed by the visibility analyzer.

Closed set of immutable node variants. A parser adapter builds the tree;
the analyzer only reads it. Only shapes relevant to member visibility are
modelled - everything else collapses into Other, whose children keep any
nested class-like containers reachable.

Variants:
    ClassLike: class declaration or class expression
    Constructor: constructor implementation or overload signature
    Method: method declaration, overload or abstract signature
    Property: property declaration
    GetAccessor / SetAccessor: get/set accessors
    Parameter: constructor parameter (maybe a parameter property)
    Other: any other node, including the source file root
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from memberaccess.domain.model.enums import Keyword, NodeKind
from memberaccess.domain.model.span import Span


@dataclass(frozen=True, slots=True)
class Modifier:
    """Modifier keyword token attached to a declaration.

    Attributes:
        keyword: Which keyword
        span: Offsets of the keyword itself
        next_token_start: Start of the token following the keyword
    """

    keyword: Keyword
    span: Span
    next_token_start: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.next_token_start < self.span.end:
            raise ValueError(
                f"next_token_start ({self.next_token_start}) must be >= span end ({self.span.end})"
            )


@dataclass(frozen=True, slots=True)
class MemberName:
    """Name of a declaration.

    Attributes:
        text: Source text of the name
        span: Offsets of the name
        is_identifier: False for computed, string, numeric and #private names
    """

    text: str
    span: Span
    is_identifier: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text:
            raise ValueError("name text must not be empty")

    @property
    def identifier(self) -> str | None:
        """Name text when it is a simple identifier, None otherwise."""
        return self.text if self.is_identifier else None


@dataclass(frozen=True, slots=True)
class Other:
    """Node with no visibility semantics.

    Attributes:
        span: Offsets of the node
        children: Nested nodes that may contain class-like containers
    """

    kind: ClassVar[NodeKind] = NodeKind.OTHER

    span: Span
    children: tuple[SyntaxNode, ...] = ()


@dataclass(frozen=True, slots=True)
class ClassLike:
    """Class declaration or class expression.

    Attributes:
        span: Offsets of the whole class
        name: Class name, None for anonymous class expressions
        members: Class body elements in declaration order
        children: Nested nodes outside the body (decorators, heritage clauses)
    """

    kind: ClassVar[NodeKind] = NodeKind.CLASS_LIKE

    span: Span
    name: str | None = None
    members: tuple[SyntaxNode, ...] = ()
    children: tuple[SyntaxNode, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for member in self.members:
            if not self.span.encloses(member.span):
                raise ValueError(f"member {member.span} outside class {self.span}")


@dataclass(frozen=True, slots=True)
class _Declaration:
    """Fields shared by every declaration that may carry a visibility keyword.

    Attributes:
        span: Offsets of the declaration, decorators included
        declaration_start: Start of the first token after any decorators
        name: Declared name, None when absent
        modifiers: Modifier keywords in source order
        decorators: Offsets of each decorator in source order
        children: Nested nodes that may contain class-like containers
    """

    span: Span
    declaration_start: int
    name: MemberName | None = None
    modifiers: tuple[Modifier, ...] = ()
    decorators: tuple[Span, ...] = ()
    children: tuple[SyntaxNode, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.span.contains(self.declaration_start):
            raise ValueError(
                f"declaration_start {self.declaration_start} outside span {self.span}"
            )
        for decorator in self.decorators:
            if decorator.end > self.declaration_start:
                raise ValueError(f"decorator {decorator} overlaps declaration start")

    def modifier(self, keyword: Keyword) -> Modifier | None:
        """First modifier with the given keyword, None if absent."""
        for modifier in self.modifiers:
            if modifier.keyword is keyword:
                return modifier
        return None

    def has_modifier(self, *keywords: Keyword) -> bool:
        """Check if any of the keywords is present."""
        return any(modifier.keyword in keywords for modifier in self.modifiers)

    @property
    def identifier(self) -> str | None:
        """Simple identifier name, None for anonymous or computed names."""
        return self.name.identifier if self.name is not None else None


@dataclass(frozen=True, slots=True)
class Method(_Declaration):
    """Method declaration, overload or abstract signature."""

    kind: ClassVar[NodeKind] = NodeKind.METHOD


@dataclass(frozen=True, slots=True)
class Property(_Declaration):
    """Property declaration."""

    kind: ClassVar[NodeKind] = NodeKind.PROPERTY


@dataclass(frozen=True, slots=True)
class GetAccessor(_Declaration):
    """Get accessor declaration."""

    kind: ClassVar[NodeKind] = NodeKind.GET_ACCESSOR


@dataclass(frozen=True, slots=True)
class SetAccessor(_Declaration):
    """Set accessor declaration."""

    kind: ClassVar[NodeKind] = NodeKind.SET_ACCESSOR


@dataclass(frozen=True, slots=True)
class Parameter(_Declaration):
    """Constructor parameter."""

    kind: ClassVar[NodeKind] = NodeKind.PARAMETER

    @property
    def is_parameter_property(self) -> bool:
        """Accessibility or readonly turns a parameter into a class property."""
        return self.has_modifier(
            Keyword.PUBLIC, Keyword.PROTECTED, Keyword.PRIVATE, Keyword.READONLY
        )


@dataclass(frozen=True, slots=True)
class Constructor(_Declaration):
    """Constructor implementation or overload signature.

    Attributes:
        keyword: Offsets of the `constructor` keyword
        parameters: Parameters in declaration order
        has_body: False for overload signatures and ambient declarations
    """

    kind: ClassVar[NodeKind] = NodeKind.CONSTRUCTOR

    keyword: Span = field(kw_only=True)
    parameters: tuple[Parameter, ...] = ()
    has_body: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        _Declaration.__post_init__(self)
        if self.keyword is None:
            raise TypeError("keyword must not be None")
        if not self.span.encloses(self.keyword):
            raise ValueError(f"keyword {self.keyword} outside constructor {self.span}")


SyntaxNode = Other | ClassLike | Constructor | Method | Property | GetAccessor | SetAccessor | Parameter
"""Any node of the tree."""

Member = Constructor | Method | Property | GetAccessor | SetAccessor | Parameter
"""Node that can carry a visibility modifier."""
