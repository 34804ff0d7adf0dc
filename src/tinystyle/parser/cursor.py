"""Character cursor shared by the hand-written parsers.

A cursor owns one input string and the index of the next unprocessed
character. Python strings index by code point, so advancing by one index
always steps over exactly one Unicode scalar value.
"""

from __future__ import annotations

from typing import Callable

from tinystyle.parser.errors import ParseError

__all__ = ["Cursor", "describe"]


def describe(ch: str | None) -> str:
    """Return a human-readable description of a character for diagnostics."""
    if ch is None:
        return "end of input"
    return repr(ch)


class Cursor:
    """Position over a text buffer, consumed one character at a time."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def eof(self) -> bool:
        return self.pos >= len(self.source)

    def next_char(self) -> str | None:
        """Return the next character without consuming it (None at eof)."""
        if self.eof():
            return None
        return self.source[self.pos]

    def peek(self, offset: int = 1) -> str | None:
        """Return the character *offset* places past the next one."""
        index = self.pos + offset
        if index >= len(self.source):
            return None
        return self.source[index]

    def starts_with(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.pos)

    def consume_char(self) -> str:
        if self.eof():
            raise self.error("unexpected end of input", expected="a character")
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def consume_while(self, test: Callable[[str], bool]) -> str:
        """Consume characters while *test* holds and return them."""
        start = self.pos
        while not self.eof() and test(self.source[self.pos]):
            self.pos += 1
        return self.source[start:self.pos]

    def consume_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def expect(self, ch: str, what: str | None = None) -> None:
        """Consume *ch* or raise a ParseError describing the mismatch."""
        found = self.next_char()
        if found != ch:
            raise self.error(
                what or "unexpected character",
                expected=repr(ch),
                found=describe(found),
            )
        self.pos += 1

    def location(self, position: int | None = None) -> tuple[int, int]:
        """Return the 1-based (line, column) of *position* (default: current)."""
        if position is None:
            position = self.pos
        line = self.source.count("\n", 0, position) + 1
        line_start = self.source.rfind("\n", 0, position) + 1
        return line, position - line_start + 1

    def error(
        self,
        message: str,
        expected: str | None = None,
        found: str | None = None,
        position: int | None = None,
    ) -> ParseError:
        """Build a ParseError pointing at *position* (default: current)."""
        if position is None:
            position = self.pos
        line, column = self.location(position)
        return ParseError(
            message,
            position=position,
            line=line,
            column=column,
            expected=expected,
            found=found,
        )
