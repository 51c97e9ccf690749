"""TypeScript/JavaScript declaration parser using tree-sitter.

Lowers the concrete syntax tree into the raw declaration model in
``raw.py``. Only top-level declarations and imports are collected.
"""

import asyncio
import logging
from typing import Any, Optional

from tree_sitter_language_pack import get_parser

from .languages import get_language_spec
from .raw import (
    ArrayEntry,
    ArrayLiteral,
    ParsedFile,
    RawClass,
    RawDefaultImport,
    RawFunction,
    RawInterface,
    RawMethod,
    RawNamedImport,
    RawNamespaceImport,
    RawParameter,
    RawProperty,
    RawSpecifier,
    RawStringImport,
    RawVariable,
)
from .tokens import VISIBILITY

logger = logging.getLogger(__name__)

CLASS_NODE_TYPES = ("class_declaration", "abstract_class_declaration")
FUNCTION_NODE_TYPES = ("function_declaration", "generator_function_declaration")
VARIABLE_NODE_TYPES = ("lexical_declaration", "variable_declaration")
PARAMETER_NODE_TYPES = ("required_parameter", "optional_parameter")
SCALAR_VALUE_TYPES = {
    "number": "number",
    "true": "boolean",
    "false": "boolean",
    "null": "null",
    "undefined": "undefined",
}


class TypescriptParser:
    """Parse TypeScript or JavaScript source into a ParsedFile."""

    def __init__(self, language: str = "typescript"):
        self.language = language
        self.ts_language = get_language_spec(language).ts_language

    async def parse_source(self, content: str) -> ParsedFile:
        """Parse without blocking the event loop."""
        return await asyncio.to_thread(self.parse, content)

    def parse(self, content: str) -> ParsedFile:
        """Parse source code and collect its declarations and imports."""
        source_bytes = content.encode("utf-8")

        # Get parser for this language
        parser = get_parser(self.ts_language)
        tree = parser.parse(source_bytes)

        lowering = _Lowering(content, source_bytes)
        lowering.walk_program(tree.root_node)
        return lowering.parsed


class _Lowering:
    """Single pass over a program node."""

    def __init__(self, content: str, source_bytes: bytes):
        self.source_bytes = source_bytes
        self.char_offsets = None if content.isascii() else _char_offsets(content)
        self.parsed = ParsedFile()

    # -- helpers -----------------------------------------------------------

    def text(self, node) -> str:
        return self.source_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def offset(self, byte_offset: int) -> int:
        """Convert a byte offset into a character offset."""
        if self.char_offsets is None:
            return byte_offset
        return self.char_offsets[byte_offset]

    def span(self, node) -> tuple[int, int]:
        """Character span of a node, excluding leading decorators."""
        start_byte = node.start_byte
        for child in node.children:
            if child.type != "decorator":
                start_byte = child.start_byte
                break
        return self.offset(start_byte), self.offset(node.end_byte)

    def type_text(self, node, field_name: str = "type") -> Optional[str]:
        """Text of a type annotation without its leading colon."""
        annotation = node.child_by_field_name(field_name)
        if annotation is None:
            return None
        if annotation.named_child_count:
            return self.text(annotation.named_children[-1])
        return self.text(annotation).lstrip(":").strip() or None

    def has_modifier(self, node, keyword: str) -> bool:
        """Check the tokens ahead of a member name for a modifier keyword."""
        name_node = node.child_by_field_name("name")
        for child in node.children:
            if name_node is not None and child.start_byte >= name_node.start_byte:
                break
            if child.type == keyword or self.text(child) == keyword:
                return True
        return False

    def visibility(self, node) -> Optional[int]:
        for child in node.children:
            if child.type == "accessibility_modifier":
                return VISIBILITY.index(self.text(child))
        name_node = node.child_by_field_name("name")
        if name_node is not None and name_node.type == "private_property_identifier":
            return VISIBILITY.index("private")
        return None

    # -- walk --------------------------------------------------------------

    def walk_program(self, root) -> None:
        for child in root.children:
            self.walk_statement(child, exported=False)

    def walk_statement(self, node, exported: bool) -> None:
        if node.type == "ERROR":
            logger.debug("Skipping unparsable region at byte %d", node.start_byte)
        elif node.type == "import_statement":
            self.lower_import(node)
        elif node.type == "export_statement":
            declaration = node.child_by_field_name("declaration")
            if declaration is None:
                declaration = node.child_by_field_name("value")
            if declaration is not None:
                self.walk_statement(declaration, exported=True)
        elif node.type == "ambient_declaration":
            for child in node.named_children:
                self.walk_statement(child, exported)
        elif node.type in CLASS_NODE_TYPES:
            self.lower_class(node, exported)
        elif node.type == "interface_declaration":
            self.lower_interface(node, exported)
        elif node.type in FUNCTION_NODE_TYPES:
            self.lower_function(node, exported)
        elif node.type in VARIABLE_NODE_TYPES:
            self.lower_variables(node, exported)
        elif node.is_named and node.type not in ("comment", "expression_statement", "empty_statement"):
            logger.debug("Ignoring top-level %s", node.type)

    # -- imports -----------------------------------------------------------

    def lower_import(self, node) -> None:
        source = node.child_by_field_name("source")
        if source is None:
            return
        library_name = self.text(source)[1:-1]
        start, end = self.offset(node.start_byte), self.offset(node.end_byte)

        clause = next((c for c in node.named_children if c.type == "import_clause"), None)
        if clause is None:
            self.parsed.imports.append(RawStringImport(library_name, start=start, end=end))
            return

        default_alias = None
        for child in clause.named_children:
            if child.type == "identifier":
                default_alias = self.text(child)
            elif child.type == "namespace_import":
                alias = next((self.text(c) for c in child.named_children if c.type == "identifier"), "")
                self.parsed.imports.append(RawNamespaceImport(library_name, alias, start=start, end=end))
                return
            elif child.type == "named_imports":
                specifiers = []
                for spec in child.named_children:
                    if spec.type != "import_specifier":
                        continue
                    name_node = spec.child_by_field_name("name")
                    alias_node = spec.child_by_field_name("alias")
                    specifiers.append(RawSpecifier(
                        specifier=self.text(name_node),
                        alias=self.text(alias_node) if alias_node is not None else None,
                    ))
                self.parsed.imports.append(RawNamedImport(
                    library_name,
                    start=start,
                    end=end,
                    specifiers=specifiers,
                    default_alias=default_alias,
                ))
                return

        if default_alias is not None:
            self.parsed.imports.append(RawDefaultImport(library_name, default_alias, start=start, end=end))

    # -- declarations ------------------------------------------------------

    def lower_class(self, node, exported: bool) -> None:
        name_node = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        if name_node is None or body is None:
            return

        start, end = self.span(node)
        raw = RawClass(self.text(name_node), start=start, end=end, is_exported=exported)

        for member in body.named_children:
            if member.type in ("method_definition", "abstract_method_signature"):
                method = self.lower_method(member)
                if method is None:
                    continue
                if method.name == "constructor":
                    raw.ctor = method
                else:
                    raw.methods.append(method)
            elif member.type == "public_field_definition":
                prop = self.lower_property(member)
                if prop is not None:
                    raw.properties.append(prop)

        self.parsed.declarations.append(raw)

    def lower_interface(self, node, exported: bool) -> None:
        name_node = node.child_by_field_name("name")
        body = node.child_by_field_name("body")
        if name_node is None or body is None:
            return

        start, end = self.span(node)
        raw = RawInterface(self.text(name_node), start=start, end=end, is_exported=exported)

        for member in body.named_children:
            if member.type == "method_signature":
                method = self.lower_method(member)
                if method is not None:
                    raw.methods.append(method)
            elif member.type == "property_signature":
                prop = self.lower_property(member)
                if prop is not None:
                    raw.properties.append(prop)

        self.parsed.declarations.append(raw)

    def lower_function(self, node, exported: bool) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return

        start, end = self.span(node)
        self.parsed.declarations.append(RawFunction(
            self.text(name_node),
            start=start,
            end=end,
            type=self.type_text(node, "return_type"),
            is_exported=exported,
            parameters=self.lower_parameters(node.child_by_field_name("parameters")),
        ))

    def lower_variables(self, node, exported: bool) -> None:
        kind = node.child_by_field_name("kind")
        if kind is None and node.child_count:
            kind = node.children[0]
        is_const = kind is not None and self.text(kind) == "const"

        for declarator in node.named_children:
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            if name_node is None:
                continue
            value, value_type = self.lower_value(declarator.child_by_field_name("value"))
            start, end = self.span(declarator)
            self.parsed.declarations.append(RawVariable(
                self.text(name_node),
                start=start,
                end=end,
                type=self.type_text(declarator),
                value=value,
                value_type=value_type,
                is_exported=exported,
                is_const=is_const,
            ))

    # -- members -----------------------------------------------------------

    def lower_method(self, node) -> Optional[RawMethod]:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        start, end = self.span(node)
        return RawMethod(
            self.text(name_node),
            start=start,
            end=end,
            type=self.type_text(node, "return_type"),
            visibility=self.visibility(node),
            is_static=self.has_modifier(node, "static"),
            parameters=self.lower_parameters(node.child_by_field_name("parameters")),
        )

    def lower_property(self, node) -> Optional[RawProperty]:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        value, value_type = self.lower_value(node.child_by_field_name("value"))
        start, end = self.span(node)
        return RawProperty(
            self.text(name_node),
            start=start,
            end=end,
            type=self.type_text(node),
            value=value,
            value_type=value_type,
            visibility=self.visibility(node),
            is_static=self.has_modifier(node, "static"),
            is_readonly=self.has_modifier(node, "readonly"),
        )

    def lower_parameters(self, node) -> list[RawParameter]:
        if node is None:
            return []

        parameters = []
        for child in node.named_children:
            if child.type in PARAMETER_NODE_TYPES:
                pattern = child.child_by_field_name("pattern")
                if pattern is None:
                    continue
                value, value_type = self.lower_value(child.child_by_field_name("value"))
                parameters.append(RawParameter(
                    self.text(pattern),
                    start=self.offset(child.start_byte),
                    end=self.offset(child.end_byte),
                    type=self.type_text(child),
                    value=value,
                    value_type=value_type,
                    visibility=self.visibility(child),
                ))
            elif child.type in ("identifier", "rest_pattern", "object_pattern", "array_pattern"):
                parameters.append(RawParameter(
                    self.text(child),
                    start=self.offset(child.start_byte),
                    end=self.offset(child.end_byte),
                ))
            elif child.type == "assignment_pattern":
                left = child.child_by_field_name("left")
                value, value_type = self.lower_value(child.child_by_field_name("right"))
                parameters.append(RawParameter(
                    self.text(left) if left is not None else self.text(child),
                    start=self.offset(child.start_byte),
                    end=self.offset(child.end_byte),
                    value=value,
                    value_type=value_type,
                ))
        return parameters

    # -- values ------------------------------------------------------------

    def lower_value(self, node) -> tuple[Any, Optional[str]]:
        """Lower an initializer into (value, literal kind)."""
        if node is None:
            return None, None
        if node.type == "string":
            return self.text(node)[1:-1], "string"
        if node.type in SCALAR_VALUE_TYPES:
            return self.text(node), SCALAR_VALUE_TYPES[node.type]
        if node.type in ("array", "object") and not self.is_literal(node):
            return self.text(node), "expression"
        if node.type == "array" and node.named_child_count:
            return ArrayLiteral([ArrayEntry(self.scalar(c)) for c in node.named_children if c.type != "comment"]), "array"
        if node.type == "object" and node.named_child_count:
            return ArrayLiteral(self.object_entries(node)), "array"
        return self.text(node), "expression"

    def is_literal(self, node) -> bool:
        """True if the node is built only from JSON-like literals."""
        if node.type in ("string", "number", "true", "false", "null"):
            return True
        if node.type == "unary_expression":
            argument = node.child_by_field_name("argument")
            return argument is not None and argument.type == "number"
        if node.type == "array":
            return all(self.is_literal(c) for c in node.named_children if c.type != "comment")
        if node.type == "object":
            for child in node.named_children:
                if child.type == "comment":
                    continue
                if child.type != "pair" or child.child_by_field_name("key").type == "computed_property_name":
                    return False
                if not self.is_literal(child.child_by_field_name("value")):
                    return False
            return True
        return False

    def object_entries(self, node) -> list[ArrayEntry]:
        entries = []
        for child in node.named_children:
            if child.type == "pair":
                key = child.child_by_field_name("key")
                key_text = self.text(key)
                if key.type == "string":
                    key_text = key_text[1:-1]
                entries.append(ArrayEntry(self.scalar(child.child_by_field_name("value")), key=key_text))
        return entries

    def scalar(self, node) -> Any:
        """Decode a literal element into a plain Python value."""
        text = self.text(node)
        if node.type == "string":
            return text[1:-1]
        if node.type in ("number", "unary_expression"):
            return _number(text)
        if node.type in ("true", "false"):
            return node.type == "true"
        if node.type == "null":
            return None
        if node.type == "array":
            return [self.scalar(c) for c in node.named_children if c.type != "comment"]
        if node.type == "object":
            return {entry.key: entry.value for entry in self.object_entries(node)}
        return text


def _number(text: str):
    try:
        return int(text, 0)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def _char_offsets(content: str) -> list[int]:
    """Character offset for every UTF-8 byte offset of ``content``."""
    offsets = []
    for index, char in enumerate(content):
        offsets.extend([index] * len(char.encode("utf-8")))
    offsets.append(len(content))
    return offsets
