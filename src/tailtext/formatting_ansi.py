"""ANSI terminal renderer for one resolved span.

One combined SGR sequence per span (bold, faint, italic, underline, then
24-bit foreground and background) built through Rich, closed by a single
reset. Strikethrough is wrapped on by hand afterwards.
"""

from rich.color import Color as RichColor
from rich.color import ColorSystem
from rich.style import Style as RichStyle

from tailtext.colors import CURRENT_COLOR, RESET, STRIKE, STRIKE_OFF
from tailtext.style import Color, ResolvedSpan

# currentColor has no RGB value; map it to bright white on both layers
_CURRENT_FG = "bright_white"
_CURRENT_BG = "bright_white"


def _rich_color(color: Color | None, current: str) -> RichColor | None:
    """Rich color for a style Color, or None when it cannot be expressed."""
    if color is None:
        return None
    if color.value == CURRENT_COLOR:
        return RichColor.parse(current)
    if color.is_hex:
        return RichColor.parse(color.value)
    # transparent and literal CSS names are skipped
    return None


def sgr_wrap(text: str, span: ResolvedSpan) -> str:
    """Wrap ``text`` in the combined SGR sequence; no attributes → text unchanged."""
    flags = span.flags
    style = span.style
    rich_style = RichStyle(
        bold=flags.bold or None,
        dim=flags.faint or None,
        italic=flags.italic or None,
        underline=flags.underline or None,
        color=_rich_color(style.foreground if style else None, _CURRENT_FG),
        bgcolor=_rich_color(style.background if style else None, _CURRENT_BG),
    )
    return rich_style.render(text, color_system=ColorSystem.TRUECOLOR)


def strike_wrap(rendered: str) -> str:
    """Add strikethrough around an already-rendered span.

    A span ending in the full reset gets its reset moved outside the strike
    sequence; a bare span is closed with the partial strike-off code.
    """
    if rendered.endswith(RESET):
        return STRIKE + rendered[: -len(RESET)] + RESET
    return STRIKE + rendered + STRIKE_OFF


def render_span(span: ResolvedSpan) -> str:
    """Render a span's own text to an ANSI string."""
    if not span.text:
        return ""
    if span.style is None:
        return span.text
    result = sgr_wrap(span.text, span)
    if span.flags.strikethrough:
        result = strike_wrap(result)
    return result
