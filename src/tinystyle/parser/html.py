"""Hand-written recursive-descent parser for a small subset of HTML.

Grammar:
    Nodes     = ( Element | Text )*
    Element   = '<' Name Attribute* '>' Nodes '</' Name '>'
    Attribute = Name '=' ( '"' [^"]* '"' | "'" [^']* "'" )
    Text      = [^<]+
    Name      = [A-Za-z0-9]+

Whitespace between sibling nodes, between attributes and before the
closing '>' of a start tag is discarded. Comments, doctypes, self-closing
tags and character entities are not recognised.
"""

from __future__ import annotations

import logging

from tinystyle.config import DEFAULT_CONFIG, ParserConfig
from tinystyle.model.dom import AttrMap, Node, elem, text
from tinystyle.parser.cursor import Cursor, describe

__all__ = ["parse_document"]

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")


def _is_name_char(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


class _MarkupParser:
    """Parse state for a single document: one cursor, one config."""

    def __init__(self, source: str, config: ParserConfig) -> None:
        self.cursor = Cursor(source)
        self.config = config

    # --- nodes ----------------------------------------------------------------

    def parse_nodes(self, depth: int) -> list[Node]:
        """Parse sibling nodes until end of input or a closing tag."""
        cursor = self.cursor
        nodes: list[Node] = []
        while True:
            cursor.consume_whitespace()
            if cursor.eof() or cursor.starts_with("</"):
                break
            if cursor.next_char() == "<":
                nodes.append(self.parse_element(depth + 1))
            else:
                nodes.append(self.parse_text())
        return nodes

    def parse_text(self) -> Node:
        return text(self.cursor.consume_while(lambda c: c != "<"))

    def parse_element(self, depth: int) -> Node:
        """Parse an element: start tag, contents and matching end tag."""
        cursor = self.cursor
        start = cursor.pos
        if depth > self.config.max_depth:
            raise cursor.error(
                f"maximum nesting depth of {self.config.max_depth} exceeded",
                position=start,
            )

        # Start tag
        cursor.expect("<")
        tag_name = self.parse_name("tag name")
        attributes = self.parse_attributes()
        cursor.expect(">", "unterminated start tag")

        children = self.parse_nodes(depth)

        # End tag
        if cursor.eof():
            raise cursor.error(
                f"unclosed element <{tag_name}>",
                expected=repr(f"</{tag_name}>"),
                found="end of input",
            )
        close_start = cursor.pos
        cursor.expect("<")
        cursor.expect("/")
        closing_name = cursor.consume_while(_is_name_char)
        if closing_name != tag_name:
            raise cursor.error(
                "mismatched closing tag",
                expected=repr(f"</{tag_name}>"),
                found=repr(f"</{closing_name}>"),
                position=close_start,
            )
        cursor.expect(">", "unterminated end tag")

        return elem(tag_name, attributes, children)

    # --- tags and attributes --------------------------------------------------

    def parse_name(self, what: str) -> str:
        """Parse a tag or attribute name, which must not be empty."""
        name = self.cursor.consume_while(_is_name_char)
        if not name:
            raise self.cursor.error(
                f"expected {what}",
                expected=what,
                found=describe(self.cursor.next_char()),
            )
        return name

    def parse_attributes(self) -> AttrMap:
        """Parse whitespace-separated name="value" pairs up to '>'."""
        cursor = self.cursor
        attributes: AttrMap = {}
        while True:
            cursor.consume_whitespace()
            ch = cursor.next_char()
            if ch == ">":
                break
            if ch is None:
                raise cursor.error(
                    "unterminated start tag",
                    expected="'>'",
                    found="end of input",
                )
            name, value = self.parse_attr()
            attributes[name] = value
        return attributes

    def parse_attr(self) -> tuple[str, str]:
        name = self.parse_name("attribute name")
        self.cursor.expect("=", f"missing '=' after attribute {name!r}")
        return name, self.parse_attr_value()

    def parse_attr_value(self) -> str:
        """Parse a value enclosed in double or single quotes."""
        cursor = self.cursor
        open_quote = cursor.next_char()
        if open_quote not in _QUOTES:
            raise cursor.error(
                "attribute value must be quoted",
                expected="'\"' or \"'\"",
                found=describe(open_quote),
            )
        cursor.consume_char()
        value = cursor.consume_while(lambda c: c != open_quote)
        if cursor.eof():
            raise cursor.error(
                "unterminated attribute value",
                expected=repr(open_quote),
                found="end of input",
            )
        cursor.consume_char()
        return value

    def stray_closing_tag(self) -> str:
        source = self.cursor.source
        end = source.find(">", self.cursor.pos)
        if end == -1:
            return source[self.cursor.pos:]
        return source[self.cursor.pos:end + 1]


def parse_document(source: str, config: ParserConfig | None = None) -> Node:
    """Parse an HTML source string and return the root element.

    A document consisting of exactly one element is returned as-is. Any other
    top-level content (nothing, a lone text node, several siblings) is wrapped
    in an implicit root element with no attributes.

    Raises:
        ParseError: on the first malformed construct; no partial tree is
            returned.
    """
    config = config or DEFAULT_CONFIG
    parser = _MarkupParser(source, config)
    nodes = parser.parse_nodes(0)

    if not parser.cursor.eof():
        raise parser.cursor.error(
            "closing tag without matching start tag",
            expected="end of input",
            found=repr(parser.stray_closing_tag()),
        )

    if len(nodes) == 1 and nodes[0].is_element:
        root = nodes[0]
    else:
        root = elem(config.implicit_root_tag, {}, nodes)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Parsed document <%s> with %d nodes",
            root.element.tag_name,
            sum(1 for _ in root.walk()),
        )
    return root
