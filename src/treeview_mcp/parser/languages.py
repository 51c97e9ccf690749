"""Language registry mapping editor language ids onto tree-sitter grammars."""

from dataclasses import dataclass


@dataclass
class LanguageSpec:
    """How to parse one editor language."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Extension used when generating files in this language
    default_extension: str


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "typescriptreact",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascriptreact",
}


TYPESCRIPT_SPEC = LanguageSpec(ts_language="typescript", default_extension="ts")

# The tsx grammar accepts plain JavaScript including JSX
JAVASCRIPT_SPEC = LanguageSpec(ts_language="tsx", default_extension="js")

TSX_SPEC = LanguageSpec(ts_language="tsx", default_extension="tsx")


# Language registry
LANGUAGE_REGISTRY = {
    "typescript": TYPESCRIPT_SPEC,
    "typescriptreact": TSX_SPEC,
    "javascript": JAVASCRIPT_SPEC,
    "javascriptreact": JAVASCRIPT_SPEC,
}

# Extensions offered when generating a skeleton document
GENERATED_EXTENSIONS = {
    "js": "Will create a `.js` file",
    "ts": "Will create a `.ts` file",
}


def has_support(language_id: str) -> bool:
    """Check whether an editor language id can be outlined."""
    return language_id.lower() in LANGUAGE_REGISTRY


def get_language_spec(language_id: str) -> LanguageSpec:
    """Look up a language, falling back to TypeScript."""
    return LANGUAGE_REGISTRY.get(language_id.lower(), TYPESCRIPT_SPEC)
