from tinystyle.cascade.selector import matches
from tinystyle.cascade.style_tree import (
    MatchedRule,
    PropertyMap,
    StyledNode,
    match_rule,
    matching_rules,
    specified_values,
    style_tree,
)

__all__ = [
    "matches",
    "MatchedRule",
    "PropertyMap",
    "StyledNode",
    "match_rule",
    "matching_rules",
    "specified_values",
    "style_tree",
]
