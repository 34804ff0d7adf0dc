from tinystyle.stylesheet.parser import parse_stylesheet
from tinystyle.stylesheet.model import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Specificity,
    Stylesheet,
    Unit,
    Value,
    specificity,
    to_px,
)

__all__ = [
    "parse_stylesheet",
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Specificity",
    "Declaration",
    "Value",
    "Keyword",
    "Length",
    "Unit",
    "Color",
    "specificity",
    "to_px",
]
