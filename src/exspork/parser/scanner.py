# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Character cursor over declaration source text.

The parser drives a :class:`Scanner` directly instead of a token stream: the
declaration grammar delimits names and types by punctuation rather than by
lexical classes, so tokens are cut from the text on demand.
"""

# ###############
# Public Interface
# ###############


class Scanner:
    """Cursor over a single source string.

    The scanner never copies the source; :meth:`rest` and :meth:`take_until`
    return fresh ``str`` slices, so results do not keep the cursor alive.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0

    @property
    def position(self) -> int:
        """Offset of the next unconsumed character."""
        return self._pos

    def at_end(self) -> bool:
        """Return True if the whole input has been consumed."""
        return self._pos >= len(self._source)

    def current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def advance(self) -> str:
        """Consume the current character and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def reset(self, position: int) -> None:
        """Rewind the cursor to an earlier *position*."""
        self._pos = position

    def rest(self) -> str:
        """Return the unconsumed remainder of the input."""
        return self._source[self._pos :]

    def location(self, position: int | None = None) -> tuple[int, int]:
        """Return the 1-based (line, column) of *position* (default: the cursor)."""
        pos = self._pos if position is None else position
        line = self._source.count("\n", 0, pos) + 1
        line_start = self._source.rfind("\n", 0, pos) + 1
        return line, pos - line_start + 1

    # ------------------------------------------------------------------
    # Consumers
    # ------------------------------------------------------------------

    def skip_whitespace(self) -> int:
        """Consume a run of whitespace and return how many characters were skipped.

        Whitespace is whatever :meth:`str.isspace` accepts, the same set
        :meth:`str.strip` trims from names and types.
        """
        start = self._pos
        while self._pos < len(self._source) and self._source[self._pos].isspace():
            self._pos += 1
        return self._pos - start

    def match_literal(self, text: str) -> bool:
        """Consume *text* if the input continues with it; otherwise consume nothing."""
        if self._source.startswith(text, self._pos):
            self._pos += len(text)
            return True
        return False

    def take_until(self, delimiters: str) -> str | None:
        """Consume and return the raw text before the first delimiter character.

        The delimiter itself stays unconsumed. Returns None, consuming
        nothing, if no delimiter occurs before end of input.
        """
        end = self._pos
        while end < len(self._source):
            if self._source[end] in delimiters:
                text = self._source[self._pos : end]
                self._pos = end
                return text
            end += 1
        return None
