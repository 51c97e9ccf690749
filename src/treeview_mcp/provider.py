"""Outline provider for TypeScript and JavaScript documents."""

import asyncio
import functools
import logging
from typing import Callable, Optional, Union

from .config import ProviderConfig
from .generator import generate, get_document_name
from .parser import (
    ClassToken,
    Document,
    InterfaceToken,
    TextEdit,
    TokenTree,
    TypescriptParser,
    build_token_tree,
    get_children,
    get_tree_item,
    has_support,
)

logger = logging.getLogger(__name__)


class TypescriptProvider:
    """Keeps the outline of the current document up to date.

    Each ``refresh`` is tagged with a sequence number. A finished
    extraction is stored only if no newer refresh was issued meanwhile,
    so a slow stale parse can never overwrite a newer outline.
    """

    def __init__(
        self,
        parser: Optional[TypescriptParser] = None,
        config_loader: Callable[[], ProviderConfig] = ProviderConfig.from_env,
    ):
        self._parser = parser
        self._config_loader = config_loader
        self._sequence = 0
        self._pending: Optional[asyncio.Task] = None
        self._tree: Optional[TokenTree] = None

    def has_support(self, language_id: str) -> bool:
        return has_support(language_id)

    @property
    def current_tree(self) -> Optional[TokenTree]:
        """Last committed outline, without waiting on pending work."""
        return self._tree

    def refresh(self, document: Document) -> asyncio.Task:
        """Start extracting an outline for ``document``.

        Must be called from a running event loop. Supersedes any
        extraction still in flight.
        """
        self._sequence += 1
        config = self._config_loader()
        parser = self._parser or TypescriptParser(document.language_id)

        self._pending = asyncio.ensure_future(
            self._extract(self._sequence, parser, document, config)
        )
        self._pending.add_done_callback(functools.partial(self._settled, self._sequence))
        return self._pending

    async def get_token_tree(self) -> Optional[TokenTree]:
        """Outline from the newest refresh, waiting for it if still running.

        Returns None if nothing was ever requested. A parser failure is
        raised here.
        """
        if self._pending is None:
            return None
        return await self._pending

    async def _extract(
        self,
        sequence: int,
        parser: TypescriptParser,
        document: Document,
        config: ProviderConfig,
    ) -> TokenTree:
        parsed = await parser.parse_source(document.text)
        tree = build_token_tree(parsed, document, config)

        if sequence != self._sequence:
            logger.debug("Discarding stale outline %d (latest is %d)", sequence, self._sequence)
            return tree

        self._tree = tree
        return tree

    def _settled(self, sequence: int, task: asyncio.Task) -> None:
        # Superseded tasks may never be awaited, so their failures are read here
        if task.cancelled():
            return
        error = task.exception()
        if error is not None and sequence != self._sequence:
            logger.debug("Discarding failed stale outline %d: %r", sequence, error)

    def get_tree_item(self, element):
        return get_tree_item(element)

    def get_children(self, element=None) -> list:
        return get_children(element)

    def get_document_name(self, entity_name: str, include_bodies: bool = False, extension: str = "ts") -> str:
        return get_document_name(entity_name, include_bodies, extension)

    def generate(
        self,
        entity_name: str,
        skeleton: Union[ClassToken, InterfaceToken],
        include_bodies: bool,
        config: Optional[ProviderConfig] = None,
    ) -> list[TextEdit]:
        """Emit a skeleton, reading configuration fresh when none is given."""
        return generate(entity_name, skeleton, include_bodies, config or self._config_loader())
