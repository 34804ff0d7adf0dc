"""Parser configuration."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Options shared by the markup and style-sheet parsers.

    Attributes:
        max_depth: Deepest element nesting accepted by ``parse_document``.
        strict_selectors: Reject structurally odd simple selectors (a second
            id, a ``*`` or tag name after another fragment) instead of
            letting later fragments overwrite earlier ones.
        implicit_root_tag: Tag of the element wrapping a document that does
            not have exactly one top-level node.
    """

    max_depth: int = 256
    strict_selectors: bool = False
    implicit_root_tag: str = "html"

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        # Each nesting level costs the parser two stack frames.
        depth_limit = sys.getrecursionlimit() // 3
        if self.max_depth > depth_limit:
            raise ValueError(f"max_depth must be at most {depth_limit}")
        if not self.implicit_root_tag:
            raise ValueError("implicit_root_tag must be a non-empty string")


DEFAULT_CONFIG = ParserConfig()
