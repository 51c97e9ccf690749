"""Text lookup services over one source document."""

import bisect
import logging
from pathlib import Path
from typing import Optional

from .languages import LANGUAGE_EXTENSIONS
from .tokens import Position, Range

logger = logging.getLogger(__name__)

STRICT_DIRECTIVES = ('"use strict"', "'use strict'")


class Document:
    """Source text with offset <-> line/column conversion.

    Offsets are character offsets into ``text``. Lines are split on
    ``\\n``; a trailing ``\\r`` is not part of the line text.
    """

    def __init__(self, text: str, language_id: str = "typescript", uri: Optional[str] = None):
        self.text = text
        self.language_id = language_id
        self.uri = uri
        self._line_starts = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(i + 1)

    @classmethod
    def from_path(cls, path: str) -> "Document":
        """Read a document from disk, inferring its language from the extension."""
        file_path = Path(path).expanduser()
        text = file_path.read_text(encoding="utf-8")
        language_id = LANGUAGE_EXTENSIONS.get(file_path.suffix.lower(), "typescript")
        return cls(text, language_id=language_id, uri=file_path.as_uri())

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """Convert an offset to a position, clamped to the document."""
        offset = max(0, min(offset, len(self.text)))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """Convert a position back to an offset, clamped to its line."""
        line = max(0, min(position.line, self.line_count - 1))
        line_text = self.line_at(line)
        character = max(0, min(position.character, len(line_text)))
        return self._line_starts[line] + character

    def line_at(self, line: int) -> str:
        """Full text of a line, without its line break."""
        start = self._line_starts[line]
        if line + 1 < self.line_count:
            end = self._line_starts[line + 1] - 1
        else:
            end = len(self.text)
        return self.text[start:end].rstrip("\r")

    def get_text(self, text_range: Optional[Range] = None) -> str:
        """Text within a range, or the whole document."""
        if text_range is None:
            return self.text
        return self.text[self.offset_at(text_range.start):self.offset_at(text_range.end)]

    def text_between(self, start: int, end: Optional[int]) -> str:
        """Text between two offsets; an open end runs to the end of the start line."""
        if end is None:
            position = self.position_at(start)
            return self.line_at(position.line)[position.character:]
        return self.text[start:end]

    def range_for_identifier(self, name: str, offset: int) -> Range:
        """Range of ``name`` on the line containing ``offset``.

        Returns the tight range when ``name`` occurs exactly once on that
        line. Repeated occurrences cannot be told apart by a line search,
        so the result collapses to a zero-width range at the first one.
        """
        position = self.position_at(offset)
        line = self.line_at(position.line)

        start_index = line.find(name) if name else -1
        if start_index == -1:
            return Range.empty(position)

        start = Position(position.line, start_index)
        if start_index == line.rfind(name):
            return Range(start, Position(position.line, start_index + len(name)))

        logger.debug("Ambiguous identifier %r on line %d", name, position.line)
        return Range.empty(start)

    def is_strict(self) -> bool:
        """Whether the unit opens with a "use strict" directive."""
        head = self.text.lstrip("\ufeff \t\r\n")
        return head.startswith(STRICT_DIRECTIVES)
