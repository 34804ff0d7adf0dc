"""Tests for the HTML subset parser."""

import logging

import pytest

from tinystyle.config import ParserConfig
from tinystyle.model import Node, elem, text
from tinystyle.parser import ParseError, parse_document


# ---------------------------------------------------------------------------
# Document root
# ---------------------------------------------------------------------------


class TestDocumentRoot:
    def test_empty_input(self):
        root = parse_document("")
        assert root == elem("html")
        assert root.element.attributes == {}
        assert root.children == []

    def test_whitespace_only(self):
        assert parse_document("  \n\t ") == elem("html")

    def test_single_element_is_root(self):
        root = parse_document("<body></body>")
        assert root.element.tag_name == "body"

    def test_multiple_top_level_nodes_wrapped(self):
        root = parse_document("<p>a</p><p>b</p>")
        assert root.element.tag_name == "html"
        assert [c.element.tag_name for c in root.children] == ["p", "p"]

    def test_lone_text_is_wrapped(self):
        root = parse_document("just text")
        assert root == elem("html", {}, [text("just text")])

    def test_custom_implicit_root(self):
        root = parse_document("", ParserConfig(implicit_root_tag="root"))
        assert root.element.tag_name == "root"

    @pytest.mark.parametrize("source", ["", "x", "<a></a>", "<a></a>b", " <b>x</b> "])
    def test_root_is_always_element(self, source: str) -> None:
        assert parse_document(source).is_element


# ---------------------------------------------------------------------------
# Elements and text
# ---------------------------------------------------------------------------


class TestElements:
    def test_nested_structure(self):
        root = parse_document("<html><body><h1>Title</h1><p>Hello</p></body></html>")
        assert root == elem("html", {}, [
            elem("body", {}, [
                elem("h1", {}, [text("Title")]),
                elem("p", {}, [text("Hello")]),
            ]),
        ])

    def test_whitespace_between_nodes_dropped(self):
        root = parse_document("<div>\n  <p>a</p>\n  <p>b</p>\n</div>")
        assert len(root.children) == 2

    def test_text_keeps_trailing_whitespace(self):
        root = parse_document("<p>hello <b>world</b></p>")
        assert root.children[0] == text("hello ")

    def test_mixed_content(self):
        root = parse_document("<p>one<br></br>two</p>")
        assert [repr(c) for c in root.children] == ["'one'", "<br>", "'two'"]

    def test_unicode_text(self):
        root = parse_document("<p>héllo wörld ✓</p>")
        assert root.children[0].node_type == "héllo wörld ✓"

    def test_digits_in_tag_name(self):
        assert parse_document("<h2>x</h2>").element.tag_name == "h2"


class TestAttributes:
    def test_no_attributes(self):
        assert parse_document("<div></div>").element.attributes == {}

    def test_double_quoted(self):
        root = parse_document('<div id="main" class="a b"></div>')
        assert root.element.attributes == {"id": "main", "class": "a b"}

    def test_single_quoted(self):
        root = parse_document("<div title='say \"hi\"'></div>")
        assert root.element.attributes == {"title": 'say "hi"'}

    def test_whitespace_before_close(self):
        root = parse_document('<div  id="x"   \n ></div>')
        assert root.element.attributes == {"id": "x"}

    def test_empty_value(self):
        assert parse_document('<div id=""></div>').element.attributes == {"id": ""}

    def test_duplicate_attribute_last_wins(self):
        root = parse_document('<div id="a" id="b"></div>')
        assert root.element.attributes == {"id": "b"}


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_mismatched_closing_tag(self):
        with pytest.raises(ParseError) as exc_info:
            parse_document("<a><b></a>")
        err = exc_info.value
        assert "mismatched closing tag" in str(err)
        assert err.expected == "'</b>'"
        assert err.found == "'</a>'"
        assert err.position == 6
        assert (err.line, err.column) == (1, 7)

    def test_unclosed_element(self):
        with pytest.raises(ParseError, match="unclosed element <p>"):
            parse_document("<p>text")

    def test_missing_equals(self):
        with pytest.raises(ParseError, match="missing '='"):
            parse_document('<div id "x"></div>')

    def test_stray_equals(self):
        with pytest.raises(ParseError, match="expected attribute name"):
            parse_document('<div ="x"></div>')

    def test_unquoted_value(self):
        with pytest.raises(ParseError, match="must be quoted"):
            parse_document("<div id=x></div>")

    def test_unterminated_value(self):
        with pytest.raises(ParseError, match="unterminated attribute value"):
            parse_document('<div id="x></div>')

    def test_mismatched_quotes(self):
        with pytest.raises(ParseError):
            parse_document("<div id=\"x'></div>")

    def test_unterminated_start_tag(self):
        with pytest.raises(ParseError, match="unterminated start tag"):
            parse_document("<div")

    def test_empty_tag_name(self):
        with pytest.raises(ParseError, match="expected tag name"):
            parse_document("<>x</>")

    def test_unterminated_end_tag(self):
        with pytest.raises(ParseError, match="unterminated end tag"):
            parse_document("<p>x</p")

    def test_stray_closing_tag_at_top_level(self):
        with pytest.raises(ParseError, match="closing tag without matching start tag") as exc_info:
            parse_document("<p>x</p></div>")
        assert exc_info.value.found == "'</div>'"

    def test_error_location_on_later_line(self):
        with pytest.raises(ParseError) as exc_info:
            parse_document("<div>\n  <p>x</q>\n</div>")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 7


class TestNestingLimit:
    def test_within_limit(self):
        source = "<a>" * 5 + "</a>" * 5
        root = parse_document(source, ParserConfig(max_depth=5))
        assert sum(1 for _ in root.walk()) == 5

    def test_exceeds_limit(self):
        source = "<a>" * 6 + "</a>" * 6
        with pytest.raises(ParseError, match="maximum nesting depth"):
            parse_document(source, ParserConfig(max_depth=5))

    def test_default_limit_reports_error_not_crash(self):
        depth = ParserConfig().max_depth + 1
        with pytest.raises(ParseError):
            parse_document("<a>" * depth + "</a>" * depth)

    def test_very_deep_document_reports_parse_error(self):
        with pytest.raises(ParseError, match="maximum nesting depth") as exc_info:
            parse_document("<a>" * 3000 + "</a>" * 3000)
        assert exc_info.value.position == 3 * ParserConfig().max_depth


class TestDebugLogging:
    def test_node_count_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="tinystyle.parser.html"):
            parse_document("<p>a<b>c</b></p>")
        assert "Parsed document <p> with 4 nodes" in caplog.text

    def test_tree_not_walked_when_debug_disabled(
        self, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fail_walk(self: Node):
            raise AssertionError("walk() called with debug logging disabled")

        caplog.set_level(logging.WARNING, logger="tinystyle.parser.html")
        monkeypatch.setattr(Node, "walk", fail_walk)
        assert parse_document("<p>a</p>").element.tag_name == "p"


def _count(node: Node) -> int:
    return sum(1 for _ in node.walk())


class TestFreshCursor:
    def test_parses_are_independent(self):
        first = parse_document("<p>a</p>")
        second = parse_document("<p>a</p>")
        assert first == second
        assert first is not second
        assert _count(first) == 2
