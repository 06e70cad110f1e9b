"""Utility token parser: ``"font-bold text-red-500 p-2"`` → StructuredStyle.

Tokens are folded left to right; a later token overwrites an earlier one for
the same field (``font-bold font-normal`` ends up not bold). Nothing here
raises: an unrecognized token is a no-op, an unknown color name is passed
through as a literal CSS color.

// [LAW:one-source-of-truth] The token vocabulary is defined in this module only.
"""

import logging

import tailtext.colors
import tailtext.palette
import tailtext.spacing
from tailtext.style import Color, FontStyle, Padding, StructuredStyle, TextTransform

logger = logging.getLogger(__name__)

# text-* utilities that are neither a color nor a font size
TEXT_UTILITIES = frozenset({
    "text-left", "text-center", "text-right", "text-justify", "text-start", "text-end",
    "text-ellipsis", "text-clip", "text-wrap", "text-nowrap", "text-balance", "text-pretty",
})

BG_UTILITIES = frozenset({
    "bg-fixed", "bg-local", "bg-scroll", "bg-repeat", "bg-no-repeat", "bg-repeat-x",
    "bg-repeat-y", "bg-cover", "bg-contain", "bg-auto", "bg-center", "bg-top",
    "bg-bottom", "bg-left", "bg-right", "bg-none",
})
_BG_UTILITY_PREFIXES = ("bg-opacity-", "bg-gradient-", "bg-clip-", "bg-origin-", "bg-blend-")

# token -> (field, value) on FontStyle; one token may set several fields
_FONT_TOKENS: dict[str, tuple[tuple[str, object], ...]] = {
    "bold": (("bold", True),),
    "font-bold": (("bold", True),),
    "font-semibold": (("bold", True),),
    "font-medium": (("bold", True),),
    "font-extrabold": (("bold", True),),
    "font-black": (("bold", True),),
    "font-normal": (("bold", False), ("faint", False)),
    "font-light": (("faint", True),),
    "font-thin": (("faint", True),),
    "font-extralight": (("faint", True),),
    "italic": (("italic", True),),
    "font-italic": (("italic", True),),
    "not-italic": (("italic", False),),
    "underline": (("underline", True),),
    "overline": (("underline", True),),
    "no-underline": (("underline", False),),
    "line-through": (("strikethrough", True),),
    "strikethrough": (("strikethrough", True),),
    "uppercase": (("transform", TextTransform.UPPERCASE),),
    "lowercase": (("transform", TextTransform.LOWERCASE),),
    "capitalize": (("transform", TextTransform.CAPITALIZE),),
    "normal-case": (("transform", TextTransform.NONE),),
    # opacity is approximated as faint, not alpha blending
    "opacity-25": (("faint", True),),
    "opacity-50": (("faint", True),),
    "opacity-75": (("faint", True),),
    "opacity-100": (("faint", False),),
    "invisible": (("faint", True),),
    "visible": (("faint", False),),
}


def _split_opacity(name: str) -> tuple[str, float | None]:
    """``red-500/50`` → (``red-500``, 0.5). Unparseable suffixes are kept in the name."""
    base, sep, raw = name.rpartition("/")
    if not sep or not base:
        return name, None
    try:
        percent = float(raw)
    except ValueError:
        return name, None
    if not 0 <= percent <= 100:
        return name, None
    return base, percent / 100.0


def parse_color(name: str) -> Color:
    """Resolve a color name without its ``text-``/``bg-`` prefix.

    ``red-500`` → palette hex, ``red`` → shade 500, ``[#AABBCC]`` → ``#aabbcc``,
    ``current`` → ``currentColor``. Anything unknown is returned verbatim.
    No background adaptation happens here.
    """
    name, opacity = _split_opacity(name)

    inner = tailtext.spacing.unbracket(name)
    if inner is not None:
        value = inner.strip()
        if tailtext.colors.is_hex(value):
            value = value.lower()
        return Color(value, opacity)

    special = tailtext.palette.SPECIAL_COLORS.get(name)
    if special is not None:
        return Color(special, opacity)

    hue, sep, shade = name.partition("-")
    if not sep:
        shade = tailtext.palette.DEFAULT_SHADE
    if "-" not in shade:
        value = tailtext.palette.lookup(hue, shade)
        if value is not None:
            return Color(value, opacity)

    logger.debug("color %r not in palette, passing through", name)
    return Color(name, opacity)


def _font(style: StructuredStyle) -> FontStyle:
    if style.font is None:
        style.font = FontStyle()
    return style.font


def _apply_text_token(style: StructuredStyle, token: str) -> None:
    if token in TEXT_UTILITIES or token.startswith("text-opacity-"):
        return
    rest = token[len("text-"):]
    # sizes first: text-lg and text-[14px] are sizes, text-[#fff] is a color
    size = tailtext.spacing.parse_font_size(rest)
    if size is not None:
        _font(style).size = size
        return
    if rest:
        style.foreground = parse_color(rest)


def _apply_bg_token(style: StructuredStyle, token: str) -> None:
    if token in BG_UTILITIES or token.startswith(_BG_UTILITY_PREFIXES):
        return
    rest = token[len("bg-"):]
    if rest:
        style.background = parse_color(rest)


def apply_token(style: StructuredStyle, token: str) -> bool:
    """Fold one token into ``style`` in place. Returns False for a no-op token."""
    assignments = _FONT_TOKENS.get(token)
    if assignments is not None:
        font = _font(style)
        for name, value in assignments:
            setattr(font, name, value)
        return True

    if token.startswith("text-"):
        _apply_text_token(style, token)
        return True

    if token.startswith("bg-"):
        _apply_bg_token(style, token)
        return True

    sides = tailtext.spacing.parse_padding(token)
    if sides != tailtext.spacing.NO_PADDING:
        if style.padding is None:
            style.padding = Padding()
        style.padding.merge(*sides)
        return True

    return False


def parse_style(tokens: str) -> StructuredStyle:
    """Parse a whitespace-separated token string into a StructuredStyle."""
    style = StructuredStyle()
    for token in tokens.split():
        if not apply_token(style, token):
            logger.debug("ignoring unrecognized utility token %r", token)
    return style
