"""Generator package for emitting skeleton declarations."""

from .skeleton import generate, get_document_name, render_edits

__all__ = [
    "generate",
    "get_document_name",
    "render_edits",
]
