"""Document model: Node and ElementData dataclasses."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

AttrMap = dict[str, str]


@dataclass
class ElementData:
    """Tag name and attributes of an element node."""

    tag_name: str
    attributes: AttrMap = field(default_factory=dict)

    def id(self) -> str | None:
        """Return the ``id`` attribute, or None when absent."""
        return self.attributes.get("id")

    def classes(self) -> set[str]:
        """Return the class names listed in the ``class`` attribute.

        The attribute is split on single spaces, so an element without a
        ``class`` attribute has an empty class set.
        """
        classlist = self.attributes.get("class")
        if classlist is None:
            return set()
        return set(classlist.split(" "))


@dataclass
class Node:
    """A single node in the document tree.

    ``node_type`` is either an ``ElementData`` (element node) or a ``str``
    holding the character data of a text node. Text nodes never have
    children.
    """

    node_type: ElementData | str
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.node_type, str) and self.children:
            raise ValueError("Text nodes cannot have children")

    @property
    def is_element(self) -> bool:
        return isinstance(self.node_type, ElementData)

    @property
    def is_text(self) -> bool:
        return isinstance(self.node_type, str)

    @property
    def element(self) -> ElementData:
        """Return the element data, raising TypeError for text nodes."""
        if not isinstance(self.node_type, ElementData):
            raise TypeError("Text node has no element data")
        return self.node_type

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants in depth-first pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        if isinstance(self.node_type, ElementData):
            return f"<{self.node_type.tag_name}>"
        return repr(self.node_type)


def text(data: str) -> Node:
    """Create a text node."""
    return Node(node_type=data)


def elem(name: str, attrs: AttrMap | None = None, children: list[Node] | None = None) -> Node:
    """Create an element node."""
    return Node(
        node_type=ElementData(tag_name=name, attributes=dict(attrs or {})),
        children=list(children or []),
    )
