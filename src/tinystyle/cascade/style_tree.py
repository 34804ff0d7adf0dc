"""Cascade resolution: apply a stylesheet to a document tree.

For each element every rule is checked in source order (a linear scan).
A rule's selectors are stored most specific first, so the first selector
that matches gives the rule's specificity for that element. Matched rules
are then applied from lowest to highest specificity; on ties the later
rule in the stylesheet wins, and within a rule the later declaration wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tinystyle.cascade.selector import matches
from tinystyle.model.dom import ElementData, Node
from tinystyle.stylesheet.model import Rule, Specificity, Stylesheet, Value, specificity

__all__ = [
    "MatchedRule",
    "PropertyMap",
    "StyledNode",
    "match_rule",
    "matching_rules",
    "specified_values",
    "style_tree",
]

logger = logging.getLogger(__name__)

PropertyMap = dict[str, Value]
MatchedRule = tuple[Specificity, Rule]


@dataclass
class StyledNode:
    """A document node paired with its specified property values.

    ``node`` refers back into the document tree, which must outlive the
    styled tree.
    """

    node: Node
    specified_values: PropertyMap = field(default_factory=dict)
    children: list[StyledNode] = field(default_factory=list)

    def value(self, name: str) -> Value | None:
        """Return the specified value of property *name*, if any."""
        return self.specified_values.get(name)

    def lookup(self, name: str, fallback_name: str, default: Value) -> Value:
        """Return *name*, else *fallback_name*, else *default*.

        Used for shorthand-style lookups such as ``margin-left`` falling
        back to ``margin``.
        """
        value = self.value(name)
        if value is not None:
            return value
        value = self.value(fallback_name)
        if value is not None:
            return value
        return default


def match_rule(elem: ElementData, rule: Rule) -> MatchedRule | None:
    """Return (specificity, rule) for the first matching selector, if any."""
    for selector in rule.selectors:
        if matches(elem, selector):
            return specificity(selector), rule
    return None


def matching_rules(elem: ElementData, stylesheet: Stylesheet) -> list[MatchedRule]:
    """Find all rules in *stylesheet* that match *elem*, in source order."""
    matched: list[MatchedRule] = []
    for rule in stylesheet.rules:
        match = match_rule(elem, rule)
        if match is not None:
            matched.append(match)
    return matched


def specified_values(elem: ElementData, stylesheet: Stylesheet) -> PropertyMap:
    """Cascade the declarations of every matching rule into one mapping."""
    values: PropertyMap = {}
    rules = matching_rules(elem, stylesheet)

    # Lowest specificity first; sorted() keeps source order among equals.
    rules = sorted(rules, key=lambda matched: matched[0])
    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value

    return values


def _style_node(node: Node, stylesheet: Stylesheet) -> StyledNode:
    """Style a single node; children are attached by ``style_tree``."""
    if isinstance(node.node_type, ElementData):
        values = specified_values(node.node_type, stylesheet)
    else:
        values = {}
    return StyledNode(node=node, specified_values=values)


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """Apply *stylesheet* to the tree rooted at *root*.

    Returns a StyledNode tree with the same shape as the document tree.
    Neither the document nor the stylesheet is modified. The tree is walked
    with an explicit stack, so arbitrarily deep documents are supported.
    """
    styled = _style_node(root, stylesheet)
    stack = [(root, styled)]
    while stack:
        node, parent = stack.pop()
        for child in node.children:
            styled_child = _style_node(child, stylesheet)
            parent.children.append(styled_child)
            stack.append((child, styled_child))
    logger.debug("Styled tree rooted at %r against %d rules", root, len(stylesheet.rules))
    return styled
