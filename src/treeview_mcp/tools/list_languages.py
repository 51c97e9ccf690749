"""List supported languages."""

from ..parser import LANGUAGE_EXTENSIONS, LANGUAGE_REGISTRY


def list_languages() -> dict:
    """List languages that can be outlined.
    
    Returns:
        Dict with language ids, their grammars and file extensions
    """
    languages = []
    for language_id, spec in LANGUAGE_REGISTRY.items():
        languages.append({
            "language": language_id,
            "grammar": spec.ts_language,
            "extensions": sorted(ext for ext, lang in LANGUAGE_EXTENSIONS.items() if lang == language_id),
        })

    return {
        "count": len(languages),
        "languages": languages,
    }
