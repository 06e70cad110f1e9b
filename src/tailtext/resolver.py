"""Style resolution: which style source a node uses, and its effective style.

Precedence, with no merging of the two sources:

1. a non-empty ``structured_style`` is used verbatim (raw tokens ignored);
2. otherwise non-empty raw tokens are parsed, and their colors adapted to
   the terminal background;
3. otherwise the node is unstyled.

// [LAW:single-enforcer] The only place a node's style source is chosen.
"""

import logging

import tailtext.colors
import tailtext.tokens
from tailtext.colors import BackgroundCache
from tailtext.style import ResolvedSpan, StructuredStyle, apply_transform

logger = logging.getLogger(__name__)


def effective_style(node, background: BackgroundCache | None = None) -> tuple[StructuredStyle | None, str]:
    """Return (style, classes) for ``node``.

    ``classes`` is the raw token string when tokens were the style source.
    """
    structured = node.structured_style
    tokens = " ".join(node.style.split())

    if structured is not None and not structured.is_empty():
        if tokens:
            logger.warning(
                "node has both structured_style and style=%r; using structured_style only",
                tokens,
            )
        return structured, ""

    if not tokens:
        return None, ""

    parsed = tailtext.tokens.parse_style(tokens)
    cache = background if background is not None else tailtext.colors.BACKGROUND
    if parsed.has_colors:
        is_dark = cache.is_dark()
        parsed.foreground = tailtext.colors.adapt_color(parsed.foreground, is_dark)
        parsed.background = tailtext.colors.adapt_color(parsed.background, is_dark)
    return parsed, tokens


def resolve(node, background: BackgroundCache | None = None) -> ResolvedSpan:
    """Resolve a node's own content (children excluded) for rendering."""
    style, classes = effective_style(node, background)
    text = node.content
    if style is not None:
        text = apply_transform(text, style.flags.transform)
    return ResolvedSpan(text=text, style=style, classes=classes)
