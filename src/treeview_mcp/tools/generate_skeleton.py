"""Generate skeleton - interface or class stub from an outlined entity."""

from typing import Optional

from ..generator import render_edits
from ..parser import TokenTree
from ..provider import TypescriptProvider
from .get_outline import load_document


def find_entity(tree: TokenTree, entity: str):
    """Find a class or interface token by name (classes first)."""
    for token in (tree.classes or []) + (tree.interfaces or []):
        if token.name == entity:
            return token
    return None


async def generate_skeleton(
    entity: str,
    name: str,
    path: Optional[str] = None,
    source: Optional[str] = None,
    include_bodies: bool = False,
    extension: str = "ts",
    provider: Optional[TypescriptProvider] = None,
) -> dict:
    """Generate a stub from a class or interface found in a document.
    
    Args:
        entity: Name of the class or interface to copy members from
        name: Name of the generated class or interface
        path: Path to the source file holding ``entity``
        source: Inline source text, used instead of path when given
        include_bodies: Generate a class with stub bodies instead of an interface
        extension: "ts" or "js", used for the suggested class file name
        provider: Provider to refresh (a fresh one by default)
    
    Returns:
        Dict with suggested file name, edits and rendered text
    """
    document = load_document(path, source)
    if isinstance(document, dict):
        return document

    provider = provider or TypescriptProvider()
    provider.refresh(document)
    tree = await provider.get_token_tree()

    token = find_entity(tree, entity)
    if token is None:
        return {"error": f"Class or interface not found: {entity}"}

    try:
        file_name = provider.get_document_name(name, include_bodies, extension)
    except ValueError as e:
        return {"error": str(e)}

    edits = provider.generate(name, token, include_bodies)

    return {
        "file_name": file_name,
        "edits": [
            {
                "start": [edit.range.start.line, edit.range.start.character],
                "end": [edit.range.end.line, edit.range.end.character],
                "text": edit.new_text,
            }
            for edit in edits
        ],
        "text": render_edits(edits),
    }
