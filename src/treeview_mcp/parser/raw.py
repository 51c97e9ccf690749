"""Raw declaration model produced by the external parser.

Offsets are character offsets into the parsed text. Visibility is the
parser's numeric code into ``tokens.VISIBILITY`` (None when the source
gives none). ``is_static``/``is_readonly`` are None when the parser
cannot tell, in which case builders scan the source text instead.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass
class ArrayEntry:
    """One element of an array or object literal. ``key`` is None when positional."""
    value: Any
    key: Optional[str] = None


@dataclass
class ArrayLiteral:
    """Array or object literal initializer."""
    items: list[ArrayEntry] = field(default_factory=list)


@dataclass
class RawParameter:
    name: str
    start: int = 0
    end: Optional[int] = None
    type: Optional[str] = None
    value: Any = None
    value_type: Optional[str] = None    # Literal kind: "string", "array", "number", ...
    visibility: Optional[int] = None


@dataclass
class RawProperty:
    name: str
    start: int = 0
    end: Optional[int] = None
    type: Optional[str] = None
    value: Any = None
    value_type: Optional[str] = None
    visibility: Optional[int] = None
    is_static: Optional[bool] = None
    is_readonly: Optional[bool] = None


@dataclass
class RawMethod:
    name: str
    start: int = 0
    end: Optional[int] = None
    type: Optional[str] = None
    visibility: Optional[int] = None
    is_static: Optional[bool] = None
    parameters: list[RawParameter] = field(default_factory=list)


@dataclass
class RawClass:
    name: str
    start: int = 0
    end: Optional[int] = None
    is_exported: bool = False
    ctor: Optional[RawMethod] = None
    methods: list[RawMethod] = field(default_factory=list)
    properties: list[RawProperty] = field(default_factory=list)


@dataclass
class RawInterface:
    name: str
    start: int = 0
    end: Optional[int] = None
    is_exported: bool = False
    methods: list[RawMethod] = field(default_factory=list)
    properties: list[RawProperty] = field(default_factory=list)


@dataclass
class RawVariable:
    name: str
    start: int = 0
    end: Optional[int] = None
    type: Optional[str] = None
    value: Any = None
    value_type: Optional[str] = None
    is_exported: bool = False
    is_const: bool = False


@dataclass
class RawFunction:
    name: str
    start: int = 0
    end: Optional[int] = None
    type: Optional[str] = None
    is_exported: bool = False
    parameters: list[RawParameter] = field(default_factory=list)


@dataclass
class RawSpecifier:
    specifier: str
    alias: Optional[str] = None


@dataclass
class RawNamedImport:
    library_name: str
    start: int = 0
    end: Optional[int] = None
    specifiers: Optional[list[RawSpecifier]] = None
    default_alias: Optional[str] = None


@dataclass
class RawNamespaceImport:
    library_name: str
    alias: str
    start: int = 0
    end: Optional[int] = None


@dataclass
class RawDefaultImport:
    library_name: str
    alias: str
    start: int = 0
    end: Optional[int] = None


@dataclass
class RawStringImport:
    library_name: str
    start: int = 0
    end: Optional[int] = None


RawDeclaration = Union[RawClass, RawInterface, RawVariable, RawFunction]
RawImport = Union[RawNamedImport, RawNamespaceImport, RawDefaultImport, RawStringImport]


@dataclass
class ParsedFile:
    """Everything the parser found in one source unit, in source order."""
    declarations: list[RawDeclaration] = field(default_factory=list)
    imports: list[RawImport] = field(default_factory=list)
