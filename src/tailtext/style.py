"""Structured style model shared by the token parser, resolver and renderers.

Every field of StructuredStyle is independently optional; None means
"nothing to draw" for that property.
"""

import re
from dataclasses import dataclass, fields, replace
from enum import Enum

import tailtext.colors


@dataclass(frozen=True)
class Color:
    """A resolved color value.

    ``value`` is lowercase ``#rrggbb``, one of the sentinels ``transparent``
    / ``currentColor``, or a literal CSS color passed through verbatim.
    """

    value: str
    opacity: float | None = None

    @property
    def is_sentinel(self) -> bool:
        return self.value in tailtext.colors.SENTINELS

    @property
    def is_hex(self) -> bool:
        return tailtext.colors.is_hex(self.value)

    def with_value(self, value: str) -> "Color":
        return replace(self, value=value)

    def css(self) -> str:
        """CSS value; hex colors with an opacity become ``rgba()``."""
        if self.opacity is None or not self.is_hex:
            return self.value
        r, g, b = tailtext.colors.hex_to_rgb(self.value)
        return "rgba({}, {}, {}, {:g})".format(r, g, b, self.opacity)


class TextTransform(Enum):
    NONE = "none"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CAPITALIZE = "capitalize"


@dataclass
class FontStyle:
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    faint: bool = False
    size: float | None = None  # rem
    transform: TextTransform = TextTransform.NONE

    def is_empty(self) -> bool:
        return self == FontStyle()


@dataclass
class Padding:
    """Per-side padding in rem. None leaves that side unset."""

    top: float | None = None
    right: float | None = None
    bottom: float | None = None
    left: float | None = None

    def merge(self, top=None, right=None, bottom=None, left=None) -> None:
        """Override only the sides that are given."""
        if top is not None:
            self.top = top
        if right is not None:
            self.right = right
        if bottom is not None:
            self.bottom = bottom
        if left is not None:
            self.left = left

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


@dataclass
class StructuredStyle:
    foreground: Color | None = None
    background: Color | None = None
    font: FontStyle | None = None
    padding: Padding | None = None

    def is_empty(self) -> bool:
        return (
            self.foreground is None
            and self.background is None
            and (self.font is None or self.font.is_empty())
            and (self.padding is None or self.padding.is_empty())
        )

    @property
    def has_colors(self) -> bool:
        return self.foreground is not None or self.background is not None

    @property
    def flags(self) -> FontStyle:
        """The font record, or an all-default one when unset."""
        return self.font if self.font is not None else _NO_FONT


_NO_FONT = FontStyle()

_WORD = re.compile(r"\S+")


def _capitalize(text: str) -> str:
    # first character of each word only; the rest of the word is kept as-is
    return _WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:], text)


def apply_transform(text: str, transform: TextTransform) -> str:
    if transform is TextTransform.UPPERCASE:
        return text.upper()
    if transform is TextTransform.LOWERCASE:
        return text.lower()
    if transform is TextTransform.CAPITALIZE:
        return _capitalize(text)
    return text


@dataclass(frozen=True)
class ResolvedSpan:
    """One node's own content, ready for a renderer to wrap.

    ``text`` already has the text transform applied. ``classes`` is the raw
    token string when tokens were the style source, else empty.
    """

    text: str
    style: StructuredStyle | None = None
    classes: str = ""

    @property
    def flags(self) -> FontStyle:
        return self.style.flags if self.style is not None else _NO_FONT
