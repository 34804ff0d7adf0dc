"""Tinystyle: HTML and CSS subset parsers with cascade resolution."""

from __future__ import annotations

__version__ = "0.1.0"

from tinystyle.cascade import StyledNode, matches, style_tree
from tinystyle.config import ParserConfig
from tinystyle.model import ElementData, Node, elem, text
from tinystyle.parser import ParseError, parse_document
from tinystyle.stylesheet import Stylesheet, parse_stylesheet

__all__ = [
    "__version__",
    "ParserConfig",
    "ParseError",
    "Node",
    "ElementData",
    "elem",
    "text",
    "parse_document",
    "Stylesheet",
    "parse_stylesheet",
    "StyledNode",
    "matches",
    "style_tree",
]
