"""Parser package for extracting token trees from source code."""

from .tokens import (
    VISIBILITY,
    Position,
    Range,
    TextEdit,
    TokenTree,
    ClassToken,
    InterfaceToken,
    MethodToken,
    PropertyToken,
    VariableToken,
    ImportToken,
    resolve_visibility,
)
from .languages import LanguageSpec, LANGUAGE_REGISTRY, LANGUAGE_EXTENSIONS, has_support
from .document import Document
from .normalize import normalize_value
from .builders import detect_modifiers, build_arguments, build_properties, build_methods
from .ts_parser import TypescriptParser
from .tree_builder import build_token_tree
from .hierarchy import get_tree_item, get_children, flatten_tree, token_tree_to_dict

__all__ = [
    "VISIBILITY",
    "Position",
    "Range",
    "TextEdit",
    "TokenTree",
    "ClassToken",
    "InterfaceToken",
    "MethodToken",
    "PropertyToken",
    "VariableToken",
    "ImportToken",
    "resolve_visibility",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "has_support",
    "Document",
    "normalize_value",
    "detect_modifiers",
    "build_arguments",
    "build_properties",
    "build_methods",
    "TypescriptParser",
    "build_token_tree",
    "get_tree_item",
    "get_children",
    "flatten_tree",
    "token_tree_to_dict",
]
