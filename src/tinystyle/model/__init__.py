"""Tinystyle model layer -- public type re-exports."""

from tinystyle.model.dom import AttrMap, ElementData, Node, elem, text

__all__ = [
    "AttrMap",
    "ElementData",
    "Node",
    "elem",
    "text",
]
