"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when markup or style-sheet source cannot be parsed.

    Attributes:
        position: Offset of the offending character, counted in code points.
        line: 1-based line of the offending character.
        column: 1-based column of the offending character.
        expected: What the parser required at this point.
        found: What was actually in the input.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
        expected: str | None = None,
        found: str | None = None,
    ):
        self.reason = message
        self.position = position
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.reason
        if self.expected is not None or self.found is not None:
            message += f": expected {self.expected or '?'}, found {self.found or '?'}"
        if self.line is not None and self.column is not None:
            message += f" at line {self.line}, column {self.column}"
        return message
