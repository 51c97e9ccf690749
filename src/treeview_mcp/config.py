"""Provider configuration."""

import os
from dataclasses import dataclass

DEFAULT_READONLY_CHARACTER = "@"


@dataclass(frozen=True)
class ProviderConfig:
    """Options applied to one extraction or generation request."""
    # Prefix marking read-only properties and const variables
    readonly_character: str = DEFAULT_READONLY_CHARACTER

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """Load configuration from the environment.

        TREEVIEW_READONLY_CHARACTER overrides the read-only marker.
        """
        readonly_character = os.environ.get("TREEVIEW_READONLY_CHARACTER") or DEFAULT_READONLY_CHARACTER
        return cls(readonly_character=readonly_character)
