"""Get outline - token tree for a TypeScript/JavaScript document."""

from pathlib import Path
from typing import Optional, Union

from ..parser import Document, LANGUAGE_EXTENSIONS, token_tree_to_dict
from ..provider import TypescriptProvider


def load_document(
    path: Optional[str] = None,
    source: Optional[str] = None,
    language: Optional[str] = None,
) -> Union[Document, dict]:
    """Build a Document from a file path or inline source.

    Returns an error dict when the input cannot be used.
    """
    if source is not None:
        return Document(source, language_id=language or "typescript")

    if not path:
        return {"error": "Either path or source is required"}

    file_path = Path(path).expanduser().resolve()
    if not file_path.is_file():
        return {"error": f"File not found: {path}"}

    if language is None and file_path.suffix.lower() not in LANGUAGE_EXTENSIONS:
        return {"error": f"Unsupported file type: {file_path.suffix}"}

    try:
        document = Document.from_path(str(file_path))
    except (OSError, UnicodeDecodeError) as e:
        return {"error": f"Failed to read {path}: {e}"}

    if language is not None:
        document.language_id = language
    return document


async def get_outline(
    path: Optional[str] = None,
    source: Optional[str] = None,
    language: Optional[str] = None,
    provider: Optional[TypescriptProvider] = None,
) -> dict:
    """Extract the outline of a document.
    
    Args:
        path: Path to a source file
        source: Inline source text, used instead of path when given
        language: Editor language id (inferred from the extension by default)
        provider: Provider to refresh (a fresh one by default)
    
    Returns:
        Dict with language and serialized token tree
    """
    document = load_document(path, source, language)
    if isinstance(document, dict):
        return document

    provider = provider or TypescriptProvider()
    if not provider.has_support(document.language_id):
        return {"error": f"Unsupported language: {document.language_id}"}

    provider.refresh(document)
    tree = await provider.get_token_tree()

    return {
        "file": path or "",
        "language": document.language_id,
        "outline": token_tree_to_dict(tree),
    }
