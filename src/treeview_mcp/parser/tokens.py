"""Token dataclasses making up a normalized outline."""

from dataclasses import dataclass, field
from typing import Optional


# Parser visibility codes index into this table
VISIBILITY = ("private", "protected", "public")
DEFAULT_VISIBILITY = 2

ANY_TYPE = "any"


@dataclass(frozen=True)
class Position:
    """Zero-based line/character location in a document."""
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """Span between two positions (end exclusive)."""
    start: Position
    end: Position

    @classmethod
    def empty(cls, position: Position) -> "Range":
        """Zero-width range at a position."""
        return cls(position, position)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass
class VariableToken:
    """A top-level variable or a method argument."""
    name: str
    type: str = ANY_TYPE
    value: str = ""                     # Normalized default, "" if none
    visibility: str = "public"
    position: Optional[Range] = None    # Arguments carry no position


@dataclass
class MethodToken:
    """A method, constructor or top-level function."""
    name: str
    type: Optional[str] = ANY_TYPE      # None for constructors
    visibility: str = "public"
    static: bool = False
    arguments: list[VariableToken] = field(default_factory=list)
    position: Optional[Range] = None


@dataclass
class PropertyToken:
    """A class or interface property."""
    name: str                           # Prefixed with the read-only marker when readonly
    type: str = ANY_TYPE
    value: str = ""
    visibility: str = "public"
    static: bool = False
    readonly: bool = False
    position: Optional[Range] = None


@dataclass
class ClassToken:
    """A class declaration."""
    name: str
    visibility: str = "protected"       # "public" when exported
    methods: list[MethodToken] = field(default_factory=list)
    properties: list[PropertyToken] = field(default_factory=list)
    constants: Optional[list[PropertyToken]] = None


@dataclass
class InterfaceToken(ClassToken):
    """An interface declaration. Only public properties are kept."""


@dataclass
class ImportToken:
    """A named or namespace import."""
    name: str
    position: Range
    alias: Optional[str] = None


@dataclass
class TokenTree:
    """Outline of one source unit.

    Sequences stay None until their first member is appended.
    """
    strict: bool = False
    classes: Optional[list[ClassToken]] = None
    interfaces: Optional[list[InterfaceToken]] = None
    functions: Optional[list[MethodToken]] = None
    variables: Optional[list[VariableToken]] = None
    imports: Optional[list[ImportToken]] = None

    def push(self, section: str, token) -> None:
        """Append a token to a section, allocating it on first use."""
        members = getattr(self, section)
        if members is None:
            members = []
            setattr(self, section, members)
        members.append(token)


SECTIONS = ("classes", "interfaces", "functions", "variables", "imports")


def resolve_visibility(code: Optional[int]) -> str:
    """Map a parser visibility code onto the visibility table.

    Missing or unknown codes resolve to "public".
    """
    if code is None or not 0 <= code < len(VISIBILITY):
        return VISIBILITY[DEFAULT_VISIBILITY]
    return VISIBILITY[code]


@dataclass
class TextEdit:
    """Replacement text for a line range of a target document."""
    range: Range
    new_text: str
