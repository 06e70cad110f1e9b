"""HTML renderer for one resolved span.

Semantic tags nest from the inside out as ``<u>``, ``<strong>``, ``<em>``,
``<s>``. The result sits in one ``<span>`` carrying the raw utility
tokens as ``class`` and an inline ``style`` fallback for every CSS property
that resolved.
"""

import html

from tailtext.colors import TRANSPARENT
from tailtext.style import ResolvedSpan, StructuredStyle


def tags(span: ResolvedSpan) -> list[str]:
    """Tag names, innermost first."""
    flags = span.flags
    names = []
    if flags.underline:
        names.append("u")
    if flags.bold:
        names.append("strong")
    if flags.italic:
        names.append("em")
    if flags.strikethrough:
        names.append("s")
    return names


def _rem(value: float) -> str:
    return "{:g}rem".format(value)


def css_declarations(style: StructuredStyle) -> list[str]:
    decls = []
    # transparent is the absence of a color
    if style.foreground is not None and style.foreground.value != TRANSPARENT:
        decls.append("color: {}".format(style.foreground.css()))
    if style.background is not None and style.background.value != TRANSPARENT:
        decls.append("background-color: {}".format(style.background.css()))
    flags = style.flags
    if flags.faint:
        decls.append("opacity: 0.6")
    if flags.size is not None:
        decls.append("font-size: {}".format(_rem(flags.size)))
    padding = style.padding
    if padding is not None:
        for side in ("top", "right", "bottom", "left"):
            value = getattr(padding, side)
            if value is not None:
                decls.append("padding-{}: {}".format(side, _rem(value)))
    return decls


def render_span(span: ResolvedSpan) -> str:
    """Render a span's own text to HTML."""
    if not span.text:
        return ""
    result = html.escape(span.text, quote=False)
    for name in tags(span):
        result = "<{0}>{1}</{0}>".format(name, result)

    attributes = []
    if span.classes:
        attributes.append('class="{}"'.format(html.escape(span.classes)))
    if span.style is not None:
        decls = css_declarations(span.style)
        if decls:
            attributes.append('style="{}"'.format(html.escape("; ".join(decls))))
    if attributes:
        result = "<span {}>{}</span>".format(" ".join(attributes), result)
    return result
