"""Hand-written recursive-descent parser for a tiny subset of CSS.

Syntax example:
    h1, h2.title { margin: 8px; display: block; }
    #header { color: #cc0000; }
    * { display: inline; }

Grammar:
    Stylesheet  = Rule*
    Rule        = Selectors '{' Declaration* '}'
    Selectors   = Simple ( ',' Simple )*
    Simple      = ( '*' | Ident | '#' Ident | '.' Ident )*
    Declaration = Ident ':' Value ';'
    Value       = Number Unit | '#' Hex{6} | Ident
"""

from __future__ import annotations

import logging

from tinystyle.config import DEFAULT_CONFIG, ParserConfig
from tinystyle.parser.cursor import Cursor, describe
from tinystyle.stylesheet.model import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    Value,
    specificity,
)

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def valid_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in "-_"


def _is_number_start(ch: str | None, following: str | None) -> bool:
    if ch is None:
        return False
    if ch.isdigit():
        return True
    if ch in "+-.":
        return following is not None and (following.isdigit() or following == ".")
    return False


class _StylesheetParser:
    """Parse state for a single stylesheet: one cursor, one config."""

    def __init__(self, source: str, config: ParserConfig) -> None:
        self.cursor = Cursor(source)
        self.config = config

    # --- rules ----------------------------------------------------------------

    def parse_rules(self) -> list[Rule]:
        rules: list[Rule] = []
        while True:
            self.cursor.consume_whitespace()
            if self.cursor.eof():
                break
            rules.append(self.parse_rule())
        return rules

    def parse_rule(self) -> Rule:
        """Parse a rule set: ``<selectors> { <declarations> }``."""
        selectors = self.parse_selectors()
        declarations = self.parse_declarations()
        return Rule(selectors=selectors, declarations=declarations)

    # --- selectors ------------------------------------------------------------

    def parse_selectors(self) -> tuple[Selector, ...]:
        """Parse a comma-separated selector list, most specific first."""
        cursor = self.cursor
        selectors: list[Selector] = []
        while True:
            selectors.append(self.parse_simple_selector())
            cursor.consume_whitespace()
            ch = cursor.next_char()
            if ch == ",":
                cursor.consume_char()
                cursor.consume_whitespace()
            elif ch == "{":
                break
            else:
                raise cursor.error(
                    "unexpected character in selector list",
                    expected="',' or '{'",
                    found=describe(ch),
                )

        # sorted() is stable, so equally specific selectors keep source order.
        return tuple(sorted(selectors, key=specificity, reverse=True))

    def parse_simple_selector(self) -> SimpleSelector:
        """Parse one simple selector, e.g. ``type#id.class1.class2``."""
        cursor = self.cursor
        start = cursor.pos
        tag_name: str | None = None
        id_: str | None = None
        classes: list[str] = []

        while not cursor.eof():
            ch = cursor.next_char()
            fragment_start = cursor.pos
            if ch == "#":
                cursor.consume_char()
                if id_ is not None:
                    self._odd_selector("second id in selector", fragment_start)
                id_ = self.parse_identifier()
            elif ch == ".":
                cursor.consume_char()
                class_name = self.parse_identifier()
                if class_name not in classes:
                    classes.append(class_name)
            elif ch == "*":
                # Universal selector: matches any tag.
                if fragment_start != start:
                    self._odd_selector("'*' after another selector fragment", fragment_start)
                cursor.consume_char()
            elif valid_identifier_char(ch):
                # Identifiers swallow trailing name characters, so a tag name
                # can only follow another fragment through '*'.
                if fragment_start != start:
                    self._odd_selector("tag name after another selector fragment", fragment_start)
                tag_name = self.parse_identifier()
            else:
                break

        if cursor.pos == start and self.config.strict_selectors:
            raise cursor.error(
                "empty selector",
                expected="selector",
                found=describe(cursor.next_char()),
            )
        return SimpleSelector(tag_name=tag_name, id=id_, classes=tuple(classes))

    def _odd_selector(self, message: str, position: int) -> None:
        """Reject a malformed selector fragment, or warn and continue."""
        if self.config.strict_selectors:
            raise self.cursor.error(message, position=position)
        line, column = self.cursor.location(position)
        logger.warning(
            "Accepting %s at line %d, column %d (later fragment wins)",
            message,
            line,
            column,
        )

    # --- declarations ---------------------------------------------------------

    def parse_declarations(self) -> tuple[Declaration, ...]:
        """Parse a list of declarations enclosed in ``{ ... }``."""
        cursor = self.cursor
        cursor.expect("{")
        declarations: list[Declaration] = []
        while True:
            cursor.consume_whitespace()
            ch = cursor.next_char()
            if ch == "}":
                cursor.consume_char()
                break
            if ch is None:
                raise cursor.error(
                    "unterminated declaration block",
                    expected="'}'",
                    found="end of input",
                )
            declarations.append(self.parse_declaration())
        return tuple(declarations)

    def parse_declaration(self) -> Declaration:
        """Parse one ``<property>: <value>;`` declaration."""
        cursor = self.cursor
        name = self.parse_identifier()
        cursor.consume_whitespace()
        cursor.expect(":", f"missing ':' after property {name!r}")
        cursor.consume_whitespace()
        value = self.parse_value()
        cursor.consume_whitespace()
        cursor.expect(";", f"missing ';' after value of {name!r}")
        return Declaration(name=name, value=value)

    # --- values ---------------------------------------------------------------

    def parse_value(self) -> Value:
        cursor = self.cursor
        ch = cursor.next_char()
        if _is_number_start(ch, cursor.peek()):
            return self.parse_length()
        if ch == "#":
            return self.parse_color()
        return Keyword(self.parse_identifier())

    def parse_length(self) -> Length:
        return Length(self.parse_float(), self.parse_unit())

    def parse_float(self) -> float:
        cursor = self.cursor
        start = cursor.pos
        sign = ""
        if cursor.next_char() in ("+", "-"):
            sign = cursor.consume_char()
        digits = cursor.consume_while(lambda c: c.isdigit() or c == ".")
        try:
            return float(sign + digits)
        except ValueError:
            raise cursor.error(
                "malformed number",
                expected="a number",
                found=repr(sign + digits),
                position=start,
            ) from None

    def parse_unit(self) -> Unit:
        cursor = self.cursor
        start = cursor.pos
        name = cursor.consume_while(valid_identifier_char)
        try:
            return Unit(name.lower())
        except ValueError:
            raise cursor.error(
                "unsupported unit",
                expected=" or ".join(repr(u.value) for u in Unit),
                found=repr(name) if name else describe(cursor.next_char()),
                position=start,
            ) from None

    def parse_color(self) -> Color:
        """Parse a ``#rrggbb`` colour; alpha is always opaque."""
        cursor = self.cursor
        start = cursor.pos
        cursor.expect("#")
        digits = cursor.consume_while(valid_identifier_char)
        if len(digits) != 6 or not set(digits) <= _HEX_DIGITS:
            raise cursor.error(
                "malformed color",
                expected="6 hex digits",
                found=repr(digits) if digits else describe(cursor.next_char()),
                position=start,
            )
        return Color(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
            a=255,
        )

    def parse_identifier(self) -> str:
        cursor = self.cursor
        name = cursor.consume_while(valid_identifier_char)
        if not name:
            raise cursor.error(
                "expected identifier",
                expected="identifier",
                found=describe(cursor.next_char()),
            )
        return name


def parse_stylesheet(source: str, config: ParserConfig | None = None) -> Stylesheet:
    """Parse a CSS source string into a Stylesheet.

    Returns a Stylesheet containing all parsed rules in source order, each
    with its selectors sorted from most to least specific.

    Raises:
        ParseError: on the first malformed construct; no partial stylesheet
            is returned.
    """
    parser = _StylesheetParser(source, config or DEFAULT_CONFIG)
    rules = parser.parse_rules()
    logger.debug("Parsed stylesheet with %d rules", len(rules))
    return Stylesheet(rules=tuple(rules))
