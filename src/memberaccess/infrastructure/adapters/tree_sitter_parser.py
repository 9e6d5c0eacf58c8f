"""Tree-sitter based TypeScript parser adapter.

Implements SourceParserPort on top of the tree-sitter TypeScript grammar.
Only class-like containers and their members are materialized; every
other construct is skipped while its nested classes stay reachable.

Tree-sitter reports byte offsets. They are mapped to character offsets
so that spans and fixes address the decoded source text.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import tree_sitter_typescript
from tree_sitter import Language, Parser

from memberaccess.domain.exceptions.parsing import ParsingError
from memberaccess.domain.model.enums import Keyword
from memberaccess.domain.model.source import ParsedSource, SourceText
from memberaccess.domain.model.span import Span
from memberaccess.domain.model.syntax import (
    ClassLike,
    Constructor,
    GetAccessor,
    MemberName,
    Method,
    Modifier,
    Other,
    Parameter,
    Property,
    SetAccessor,
)
from memberaccess.domain.ports.source_parser import SourceParserPort

if TYPE_CHECKING:
    from tree_sitter import Node

    from memberaccess.domain.model.syntax import SyntaxNode

logger = logging.getLogger(__name__)

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())
TSX = Language(tree_sitter_typescript.language_tsx())

_CLASS_TYPES = frozenset({"class_declaration", "abstract_class_declaration", "class"})
_METHOD_TYPES = frozenset({"method_definition", "method_signature", "abstract_method_signature"})
_PROPERTY_TYPES = frozenset({"public_field_definition", "field_definition"})
_PARAMETER_TYPES = frozenset({"required_parameter", "optional_parameter"})
_KEYWORD_TYPES = frozenset({"static", "readonly", "abstract", "declare", "async", "accessor"})
_SKIPPED_TYPES = frozenset({"decorator", "comment"})
_IDENTIFIER_TYPES = frozenset({"property_identifier", "identifier"})


class TreeSitterSourceParser(SourceParserPort):
    """TypeScript parser using tree-sitter.

    `.tsx` files use the TSX grammar, everything else plain TypeScript.
    Syntax errors are logged, not raised: the partial tree is analyzed.
    """

    def parse_source(self, text: str, path: Path) -> ParsedSource:
        """Parse source text.

        Args:
            text: Source text
            path: Path used for grammar selection and locations

        Returns:
            Source text with its syntax tree
        """
        if text is None:
            raise TypeError("text must not be None")
        if path is None:
            raise TypeError("path must not be None")

        data = text.encode("utf-8")
        language = TSX if path.suffix == ".tsx" else TYPESCRIPT
        tree = Parser(language).parse(data)

        if tree.root_node.has_error:
            logger.warning("%s: syntax errors, analyzing partial tree", path)

        root = _TreeBuilder(data, text).build(tree.root_node)
        return ParsedSource(source=SourceText(path=path, text=text), root=root)

    def parse_file(self, path: Path) -> ParsedSource:
        """Read and parse a single file.

        Raises:
            ParsingError: If file cannot be read
        """
        try:
            text = path.read_bytes().decode("utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except IsADirectoryError as e:
            raise ParsingError(path, "is a directory") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        logger.debug("Parsing %s", path)
        return self.parse_source(text, path)


class _OffsetMap:
    """Byte offset → character offset translation."""

    __slots__ = ("_table",)

    def __init__(self, data: bytes, text: str) -> None:
        if len(data) == len(text):
            self._table: list[int] | None = None
            return

        table: list[int] = []
        for index, char in enumerate(text):
            table.extend([index] * len(char.encode("utf-8")))
        table.append(len(text))
        self._table = table

    def char(self, byte_offset: int) -> int:
        return byte_offset if self._table is None else self._table[byte_offset]


class _TreeBuilder:
    """Converts one tree-sitter tree into domain syntax nodes."""

    def __init__(self, data: bytes, text: str) -> None:
        self._data = data
        self._offsets = _OffsetMap(data, text)
        self._length = len(text)

    def build(self, root: Node) -> Other:
        return Other(span=Span(0, self._length), children=self._collect(root))

    # Traversal

    def _collect(self, node: Node) -> tuple[SyntaxNode, ...]:
        """Class-likes nested in node, outermost only, in source order."""
        found: list[SyntaxNode] = []
        stack = list(reversed(node.children))
        while stack:
            current = stack.pop()
            if current.is_named and current.type in _CLASS_TYPES:
                found.append(self._class_like(current))
            else:
                stack.extend(reversed(current.children))
        return tuple(found)

    def _collect_each(self, nodes: list[Node]) -> tuple[SyntaxNode, ...]:
        return tuple(found for node in nodes for found in self._collect(node))

    def _class_like(self, node: Node) -> ClassLike:
        body = None
        children: list[SyntaxNode] = []
        for child in node.children:
            if child.type == "class_body":
                body = child
            elif child.is_named and child.type in _CLASS_TYPES:
                children.append(self._class_like(child))
            else:
                children.extend(self._collect(child))

        name_node = node.child_by_field_name("name")
        return ClassLike(
            span=self._span(node),
            name=self._text(name_node) if name_node is not None else None,
            members=self._members(body) if body is not None else (),
            children=tuple(children),
        )

    def _members(self, body: Node) -> tuple[SyntaxNode, ...]:
        # Method decorators are siblings of the method in the class body.
        members: list[SyntaxNode] = []
        pending: list[Node] = []
        for child in body.named_children:
            if child.type == "decorator":
                pending.append(child)
                continue
            if child.type == "comment":
                continue
            members.append(self._member(child, pending))
            pending = []
        return tuple(members)

    def _member(self, node: Node, leading: list[Node]) -> SyntaxNode:
        if node.type in _METHOD_TYPES:
            return self._method_like(node, leading)
        if node.type in _PROPERTY_TYPES:
            return Property(**self._declaration_fields(node, leading, node.child_by_field_name("name")))
        start = leading[0].start_byte if leading else node.start_byte
        return Other(
            span=Span(self._offsets.char(start), self._offsets.char(node.end_byte)),
            children=(*self._collect_each(leading), *self._collect(node)),
        )

    def _method_like(self, node: Node, leading: list[Node]) -> SyntaxNode:
        name_node = node.child_by_field_name("name")
        fields = self._declaration_fields(node, leading, name_node)

        if name_node is not None and self._text(name_node) == "constructor":
            fields["name"] = None
            return Constructor(
                **fields,
                keyword=self._span(name_node),
                parameters=self._parameters(node),
                has_body=node.child_by_field_name("body") is not None,
            )

        accessor = self._accessor_keyword(node, name_node)
        if accessor == "get":
            return GetAccessor(**fields)
        if accessor == "set":
            return SetAccessor(**fields)
        return Method(**fields)

    def _parameters(self, node: Node) -> tuple[Parameter, ...]:
        formal = node.child_by_field_name("parameters")
        if formal is None:
            formal = next((c for c in node.children if c.type == "formal_parameters"), None)
        if formal is None:
            return ()

        parameters: list[Parameter] = []
        for child in formal.named_children:
            if child.type not in _PARAMETER_TYPES:
                continue
            pattern = child.child_by_field_name("pattern")
            fields = self._declaration_fields(child, [], pattern)
            fields["children"] = ()
            parameters.append(Parameter(**fields))
        return tuple(parameters)

    # Declaration parts

    def _declaration_fields(
        self,
        node: Node,
        leading: list[Node],
        name_node: Node | None,
    ) -> dict[str, object]:
        """Constructor kwargs shared by every declaration variant."""
        first_token = next((c for c in node.children if c.type not in _SKIPPED_TYPES), node)
        inner_decorators = [
            c for c in node.children if c.type == "decorator" and c.end_byte <= first_token.start_byte
        ]
        decorators = [*leading, *inner_decorators]

        start = decorators[0].start_byte if decorators else node.start_byte

        return {
            "span": Span(self._offsets.char(start), self._offsets.char(node.end_byte)),
            "declaration_start": self._offsets.char(first_token.start_byte),
            "name": self._name(name_node),
            "modifiers": self._modifiers(node, name_node),
            "decorators": tuple(self._span(d) for d in decorators),
            "children": (*self._collect_each(leading), *self._collect(node)),
        }

    def _modifiers(self, node: Node, name_node: Node | None) -> tuple[Modifier, ...]:
        """Modifier keywords appearing before the name."""
        modifiers: list[Modifier] = []
        children = node.children
        stop = name_node.start_byte if name_node is not None else node.end_byte

        for index, child in enumerate(children):
            if child.start_byte >= stop:
                break

            keyword = self._keyword(child)
            if keyword is None:
                continue

            span = self._span(child)
            if child.type.startswith("static "):
                # "static get"/"static set" is a single token
                span = Span(span.start, span.start + len("static"))
            following = children[index + 1] if index + 1 < len(children) else None
            next_start = self._offsets.char(following.start_byte) if following is not None else span.end
            modifiers.append(Modifier(keyword=keyword, span=span, next_token_start=max(next_start, span.end)))

        return tuple(modifiers)

    def _keyword(self, child: Node) -> Keyword | None:
        if child.type == "accessibility_modifier":
            return Keyword(self._text(child).strip())
        if child.type == "override_modifier":
            return Keyword.OVERRIDE
        if child.is_named:
            return None
        if child.type in _KEYWORD_TYPES:
            return Keyword(child.type)
        if child.type.startswith("static "):
            return Keyword.STATIC
        return None

    def _accessor_keyword(self, node: Node, name_node: Node | None) -> str | None:
        stop = name_node.start_byte if name_node is not None else node.end_byte
        for child in node.children:
            if child.start_byte >= stop:
                break
            if child.is_named:
                continue
            if child.type in ("get", "set"):
                return child.type
            if child.type in ("static get", "static set"):
                return child.type.removeprefix("static ")
        return None

    def _name(self, name_node: Node | None) -> MemberName | None:
        if name_node is None:
            return None
        return MemberName(
            text=self._text(name_node),
            span=self._span(name_node),
            is_identifier=name_node.type in _IDENTIFIER_TYPES,
        )

    # Offsets

    def _span(self, node: Node) -> Span:
        return Span(self._offsets.char(node.start_byte), self._offsets.char(node.end_byte))

    def _text(self, node: Node) -> str:
        return self._data[node.start_byte : node.end_byte].decode("utf-8")
