"""Assemble a TokenTree from a parsed source unit."""

import logging
from dataclasses import replace

from ..config import ProviderConfig
from .builders import build_arguments, build_methods, build_properties
from .document import Document
from .normalize import normalize_value
from .raw import (
    ParsedFile,
    RawClass,
    RawFunction,
    RawInterface,
    RawNamedImport,
    RawNamespaceImport,
    RawVariable,
)
from .tokens import (
    ANY_TYPE,
    ClassToken,
    ImportToken,
    InterfaceToken,
    MethodToken,
    Range,
    TokenTree,
    VariableToken,
)

logger = logging.getLogger(__name__)


def build_token_tree(parsed: ParsedFile, document: Document, config: ProviderConfig) -> TokenTree:
    """Walk declarations then imports once, in source order."""
    tree = TokenTree(strict=document.is_strict())

    for dec in parsed.declarations:
        if isinstance(dec, RawClass):
            tree.push("classes", _class_token(dec, document, config))
        elif isinstance(dec, RawInterface):
            tree.push("interfaces", _interface_token(dec, document, config))
        elif isinstance(dec, RawVariable):
            tree.push("variables", _variable_token(dec, document, config))
        elif isinstance(dec, RawFunction):
            tree.push("functions", _function_token(dec, document))
        else:
            logger.debug("Skipping unsupported declaration %s", type(dec).__name__)

    for imp in parsed.imports:
        if isinstance(imp, RawNamedImport) and imp.specifiers is not None:
            names = ", ".join(spec.specifier for spec in imp.specifiers)
            tree.push("imports", ImportToken(
                name=f"{imp.library_name}: {names}",
                position=_import_position(imp, document),
            ))
        elif isinstance(imp, RawNamespaceImport):
            tree.push("imports", ImportToken(
                name=imp.library_name,
                alias=imp.alias,
                position=_import_position(imp, document),
            ))
        else:
            logger.debug("Skipping unsupported import %s", type(imp).__name__)

    return tree


def _visibility(raw) -> str:
    return "public" if raw.is_exported else "protected"


def _class_token(dec: RawClass, document: Document, config: ProviderConfig) -> ClassToken:
    methods = list(dec.methods)
    if dec.ctor is not None:
        # Constructors always render first
        methods.insert(0, replace(dec.ctor, name="constructor"))

    return ClassToken(
        name=dec.name,
        visibility=_visibility(dec),
        methods=build_methods(methods, document),
        properties=build_properties(dec.properties, document, config.readonly_character),
    )


def _interface_token(dec: RawInterface, document: Document, config: ProviderConfig) -> InterfaceToken:
    properties = build_properties(dec.properties, document, config.readonly_character)
    return InterfaceToken(
        name=dec.name,
        visibility=_visibility(dec),
        methods=build_methods(dec.methods, document),
        properties=[p for p in properties if p.visibility == "public"],
    )


def _variable_token(dec: RawVariable, document: Document, config: ProviderConfig) -> VariableToken:
    return VariableToken(
        name=(config.readonly_character if dec.is_const else "") + dec.name,
        type=dec.type or ANY_TYPE,
        value=normalize_value(dec.value, dec.value_type or dec.type),
        visibility=_visibility(dec),
        position=document.range_for_identifier(dec.name, dec.start),
    )


def _function_token(dec: RawFunction, document: Document) -> MethodToken:
    # Top-level functions have no instance binding
    return MethodToken(
        name=dec.name,
        type=dec.type or ANY_TYPE,
        visibility=_visibility(dec),
        static=True,
        arguments=build_arguments(dec.parameters),
        position=document.range_for_identifier(dec.name, dec.start),
    )


def _import_position(imp, document: Document) -> Range:
    return Range.empty(document.position_at(imp.start))
