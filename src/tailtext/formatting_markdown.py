"""Markdown renderer for one resolved span.

Decorations become an ordered list of (open, close) marker pairs applied
once around the text: bold innermost, then italic, then strikethrough.
Underline has no Markdown form and is dropped. Colors fall back to an
inline-styled HTML span around the marked text.
"""

from tailtext.colors import TRANSPARENT
from tailtext.style import Color, ResolvedSpan, StructuredStyle

BOLD = ("**", "**")
ITALIC = ("*", "*")
STRIKE = ("~~", "~~")


def markers(span: ResolvedSpan) -> list[tuple[str, str]]:
    """Marker pairs, innermost first."""
    flags = span.flags
    pairs = []
    if flags.bold:
        pairs.append(BOLD)
    if flags.italic:
        pairs.append(ITALIC)
    if flags.strikethrough:
        pairs.append(STRIKE)
    return pairs


def _visible(color: Color | None) -> bool:
    return color is not None and color.value != TRANSPARENT


def css_declarations(style: StructuredStyle) -> list[str]:
    decls = []
    if _visible(style.foreground):
        decls.append("color: {}".format(style.foreground.css()))
    if _visible(style.background):
        decls.append("background-color: {}".format(style.background.css()))
    if style.flags.faint:
        decls.append("opacity: 0.6")
    return decls


def render_span(span: ResolvedSpan) -> str:
    """Render a span's own text to Markdown."""
    if not span.text:
        return ""
    result = span.text
    for open_marker, close_marker in markers(span):
        result = open_marker + result + close_marker

    style = span.style
    if style is not None and (_visible(style.foreground) or _visible(style.background)):
        result = '<span style="{}">{}</span>'.format("; ".join(css_declarations(style)), result)
    return result
