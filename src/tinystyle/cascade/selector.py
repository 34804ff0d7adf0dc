"""Selector matching against a single element."""

from __future__ import annotations

from typing import assert_never

from tinystyle.model.dom import ElementData
from tinystyle.stylesheet.model import Selector, SimpleSelector

__all__ = ["matches", "matches_simple_selector"]


def matches(elem: ElementData, selector: Selector) -> bool:
    """Return True if *selector* matches *elem*."""
    if isinstance(selector, SimpleSelector):
        return matches_simple_selector(elem, selector)
    assert_never(selector)


def matches_simple_selector(elem: ElementData, selector: SimpleSelector) -> bool:
    """Check each component of a simple selector against the element.

    - tag name, if given, must equal the element's tag name;
    - id, if given, must equal the element's ``id`` attribute;
    - every class must appear in the element's class list.

    A selector without components (``*``) matches every element.
    """
    if selector.tag_name is not None and selector.tag_name != elem.tag_name:
        return False

    if selector.id is not None and selector.id != elem.id():
        return False

    if selector.classes:
        elem_classes = elem.classes()
        if any(class_name not in elem_classes for class_name in selector.classes):
            return False

    return True
