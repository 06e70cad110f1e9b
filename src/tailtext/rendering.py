"""Text tree rendering: one entry point for all four output formats.

Every format renders a node the same way:

    wrap(resolve(node)) + "".join(render(child) for child in node.children)

and differs only in ``wrap``. Children are never inside their parent's
wrapper.

// [LAW:one-type-per-behavior] Formats are a closed enum, not subclasses.
"""

from enum import Enum

import tailtext.formatting_ansi
import tailtext.formatting_html
import tailtext.formatting_markdown
import tailtext.resolver
from tailtext.colors import BackgroundCache
from tailtext.style import ResolvedSpan


class Format(Enum):
    PLAIN = "plain"
    ANSI = "ansi"
    MARKDOWN = "markdown"
    HTML = "html"


def render_plain_span(span: ResolvedSpan) -> str:
    return span.text


_SPAN_RENDERERS = {
    Format.PLAIN: render_plain_span,
    Format.ANSI: tailtext.formatting_ansi.render_span,
    Format.MARKDOWN: tailtext.formatting_markdown.render_span,
    Format.HTML: tailtext.formatting_html.render_span,
}


def render(node, fmt: Format, background: BackgroundCache | None = None) -> str:
    """Render ``node`` and its children, in order, to ``fmt``."""
    wrap = _SPAN_RENDERERS[fmt]
    parts = [wrap(tailtext.resolver.resolve(node, background))]
    for child in node.children:
        parts.append(render(child, fmt, background))
    return "".join(parts)


def render_plain(node, background: BackgroundCache | None = None) -> str:
    return render(node, Format.PLAIN, background)


def render_ansi(node, background: BackgroundCache | None = None) -> str:
    return render(node, Format.ANSI, background)


def render_markdown(node, background: BackgroundCache | None = None) -> str:
    return render(node, Format.MARKDOWN, background)


def render_html(node, background: BackgroundCache | None = None) -> str:
    return render(node, Format.HTML, background)
