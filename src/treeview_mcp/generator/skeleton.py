"""Generate interface or class stubs from an outlined class/interface."""

from typing import Optional, Union

from ..config import ProviderConfig
from ..parser.languages import GENERATED_EXTENSIONS
from ..parser.tokens import (
    ClassToken,
    InterfaceToken,
    MethodToken,
    Position,
    PropertyToken,
    Range,
    TextEdit,
)

INDENT = "    "
EOL = "\n"

# Return types that are left off generated signatures
UNTYPED_RETURNS = (None, "", "mixed")


class _EditCollector:
    """Collect edits, tracking the line each one lands on."""

    def __init__(self):
        self.edits: list[TextEdit] = []
        self.line = 0

    def add(self, text: str) -> None:
        lines = text.split(EOL)
        end = Position(self.line + len(lines) - 1, len(lines[-1]))
        self.edits.append(TextEdit(Range(Position(self.line, 0), end), text + EOL))
        self.line += len(lines)


def generate(
    entity_name: str,
    skeleton: Union[ClassToken, InterfaceToken],
    include_bodies: bool,
    config: Optional[ProviderConfig] = None,
) -> list[TextEdit]:
    """Emit a stub for ``entity_name`` exposing the public surface of ``skeleton``.

    With ``include_bodies`` the result is a class whose methods throw
    "Not implemented"; without, an interface of bare signatures. Only
    public constants and methods are carried over.

    Args:
        entity_name: Name of the generated class or interface
        skeleton: Outlined class or interface to copy members from
        include_bodies: Emit a class with stub bodies instead of an interface
        config: Supplies the read-only marker stripped from constant names

    Returns:
        Ordered list of TextEdit, one per emitted line or block
    """
    config = config or ProviderConfig()
    out = _EditCollector()

    out.add(f"export {'class' if include_bodies else 'interface'} {entity_name} {{")

    constants = [c for c in _constants(skeleton) if c.visibility == "public"]
    methods = [m for m in skeleton.methods or [] if m.visibility == "public"]

    for constant in constants:
        out.add(INDENT + _constant_line(constant, config.readonly_character))
    if constants and methods:
        out.add("")

    for index, method in enumerate(methods):
        signature = INDENT + _signature(method)
        if not include_bodies:
            out.add(signature + ";")
            continue

        out.add(EOL.join([
            signature,
            INDENT + "{",
            INDENT * 2 + 'throw new Error("Not implemented");',
            INDENT + "}",
        ]))
        if index < len(methods) - 1:
            out.add("")

    out.add("}")
    return out.edits


def render_edits(edits: list[TextEdit]) -> str:
    """Join generated edits into document text."""
    return "".join(edit.new_text for edit in edits)


def get_document_name(entity_name: str, include_bodies: bool = False, extension: str = "ts") -> str:
    """Suggest a file name for a generated skeleton.

    Classes use the chosen extension; interfaces are always ``I<Name>.ts``.
    """
    if extension not in GENERATED_EXTENSIONS:
        raise ValueError(f"Unsupported extension: {extension}")
    if include_bodies:
        return f"{entity_name}.{extension}"
    return f"I{entity_name}.ts"


def _constants(skeleton) -> list[PropertyToken]:
    if skeleton.constants is not None:
        return skeleton.constants
    return [p for p in skeleton.properties or [] if p.static and p.readonly]


def _constant_line(constant: PropertyToken, readonly_character: str) -> str:
    name = constant.name
    if readonly_character and name.startswith(readonly_character):
        name = name[len(readonly_character):]
    if constant.value == "":
        return f"public static readonly {name};"
    return f"public static readonly {name} = {constant.value};"


def _signature(method: MethodToken) -> str:
    args = []
    for arg in method.arguments:
        rendered = f"{arg.name}: {arg.type}"
        if arg.value != "":
            rendered += f" = {arg.value}"
        args.append(rendered)

    line = f"public {method.name}({', '.join(args)})"
    if method.type not in UNTYPED_RETURNS:
        line += f": {method.type}"
    return line
