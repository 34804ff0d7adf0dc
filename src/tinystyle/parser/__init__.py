from tinystyle.parser.errors import ParseError
from tinystyle.parser.html import parse_document

__all__ = ["ParseError", "parse_document"]
