"""Stylesheet model: selectors, values, declarations, rules and stylesheets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import NamedTuple, assert_never


class Specificity(NamedTuple):
    """Selector weight, compared lexicographically.

    An id outweighs any number of classes, which outweigh any number of tags.
    """

    ids: int = 0
    classes: int = 0
    tags: int = 0


@dataclass(frozen=True)
class SimpleSelector:
    """A selector matchable against one element: ``tag#id.class1.class2``.

    A selector with no tag name (or an explicit ``*``) matches any tag.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()

    def specificity(self) -> Specificity:
        return Specificity(
            ids=1 if self.id is not None else 0,
            classes=len(set(self.classes)),
            tags=1 if self.tag_name is not None else 0,
        )

    def __str__(self) -> str:
        text = self.tag_name or ""
        if self.id is not None:
            text += f"#{self.id}"
        text += "".join(f".{c}" for c in self.classes)
        return text or "*"


# Only simple selectors are supported; compound selectors join this union.
Selector = SimpleSelector


def specificity(selector: Selector) -> Specificity:
    """Return the specificity of any selector variant."""
    if isinstance(selector, SimpleSelector):
        return selector.specificity()
    assert_never(selector)


class Unit(StrEnum):
    """Length units."""

    PX = "px"


@dataclass(frozen=True)
class Keyword:
    """A bare identifier value such as ``auto`` or ``block``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Length:
    """A numeric value with a unit, e.g. ``12px``."""

    amount: float
    unit: Unit = Unit.PX

    def to_px(self) -> float:
        if self.unit is Unit.PX:
            return self.amount
        assert_never(self.unit)

    def __str__(self) -> str:
        return f"{self.amount:g}{self.unit.value}"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def __str__(self) -> str:
        hex_rgb = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a == 255:
            return hex_rgb
        return f"{hex_rgb}{self.a:02x}"


Value = Keyword | Length | Color


def to_px(value: Value) -> float:
    """Return the size of *value* in pixels; non-lengths count as zero."""
    if isinstance(value, Length):
        return value.to_px()
    if isinstance(value, (Keyword, Color)):
        return 0.0
    assert_never(value)


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair inside a rule."""

    name: str
    value: Value


@dataclass(frozen=True)
class Rule:
    """Selectors (most specific first) paired with declarations."""

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...] = ()


@dataclass(frozen=True)
class Stylesheet:
    """The rules of a stylesheet in source order."""

    rules: tuple[Rule, ...] = field(default_factory=tuple)
