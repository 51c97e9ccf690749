"""Builders turning raw parameters, properties and methods into tokens."""

from dataclasses import dataclass

from .document import Document
from .normalize import normalize_value
from .raw import RawMethod, RawParameter, RawProperty
from .tokens import ANY_TYPE, MethodToken, PropertyToken, VariableToken, resolve_visibility

# Number of leading words searched for modifier keywords
MODIFIER_WINDOW = 5


@dataclass(frozen=True)
class Modifiers:
    readonly: bool = False
    static: bool = False


def detect_modifiers(raw_text: str) -> Modifiers:
    """Find ``readonly``/``static`` among the first words of a declaration.

    This is a keyword scan, not a syntax check: a signature broken over
    several lines, or an unrelated word such as a parameter called
    ``static`` near the start, can give the wrong answer.
    """
    words = raw_text.split(" ")[:MODIFIER_WINDOW]
    return Modifiers(readonly="readonly" in words, static="static" in words)


def build_arguments(parameters: list[RawParameter]) -> list[VariableToken]:
    """Build argument tokens. Arguments carry no position of their own."""
    arguments = []
    for parameter in parameters:
        arguments.append(VariableToken(
            name=parameter.name,
            type=parameter.type or ANY_TYPE,
            value=normalize_value(parameter.value, parameter.value_type or parameter.type),
            visibility=resolve_visibility(parameter.visibility),
        ))
    return arguments


def build_properties(
    properties: list[RawProperty],
    document: Document,
    readonly_character: str,
) -> list[PropertyToken]:
    """Build property tokens, prefixing read-only names with the marker."""
    tokens = []
    for prop in properties:
        if prop.is_readonly is None or prop.is_static is None:
            modifiers = _scan_modifiers(prop, document)
        else:
            modifiers = Modifiers()
        is_readonly = modifiers.readonly if prop.is_readonly is None else prop.is_readonly
        is_static = modifiers.static if prop.is_static is None else prop.is_static

        tokens.append(PropertyToken(
            name=(readonly_character if is_readonly else "") + prop.name,
            type=prop.type or ANY_TYPE,
            value=normalize_value(prop.value, prop.value_type or prop.type),
            visibility=resolve_visibility(prop.visibility),
            static=is_static,
            readonly=is_readonly,
            position=document.range_for_identifier(prop.name, prop.start),
        ))
    return tokens


def build_methods(methods: list[RawMethod], document: Document) -> list[MethodToken]:
    """Build method tokens. Constructors get no return type."""
    tokens = []
    for method in methods:
        if method.is_static is None:
            is_static = _scan_modifiers(method, document).static
        else:
            is_static = method.is_static

        if method.name == "constructor":
            return_type = None
        else:
            return_type = method.type or ANY_TYPE

        tokens.append(MethodToken(
            name=method.name,
            type=return_type,
            visibility=resolve_visibility(method.visibility),
            static=is_static,
            arguments=build_arguments(method.parameters),
            position=document.range_for_identifier(method.name, method.start),
        ))
    return tokens


def _scan_modifiers(node, document: Document) -> Modifiers:
    return detect_modifiers(document.text_between(node.start, node.end))
