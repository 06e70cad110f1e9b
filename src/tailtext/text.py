"""TextNode: the styled text tree.

A node is a value: the dataclass is frozen, children are held in a tuple,
and every "mutator" returns a new node with a freshly built children
tuple. Two builder chains started from the same node never share storage.

Style sources: ``style`` holds raw utility tokens (``"font-bold
text-red-500"``); ``structured_style`` holds a pre-built StructuredStyle. At
most one is meant to be authoritative; see resolver.py for the precedence.
"""

from dataclasses import dataclass, replace
from datetime import timedelta

import tailtext.rendering
from tailtext.style import StructuredStyle


def humanize_duration(value: timedelta) -> str:
    """``timedelta(hours=1, seconds=5)`` → ``1h5s``; sub-second → ``250ms``."""
    total_ms = int(round(value.total_seconds() * 1000))
    sign = "-" if total_ms < 0 else ""
    total_ms = abs(total_ms)
    if total_ms < 1000:
        return "{}{}ms".format(sign, total_ms)
    seconds, _ms = divmod(total_ms, 1000)
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    parts = [
        "{}{}".format(amount, unit)
        for amount, unit in ((days, "d"), (hours, "h"), (minutes, "m"), (seconds, "s"))
        if amount
    ]
    return sign + "".join(parts)


def _format_arg(arg):
    if isinstance(arg, float):
        return "{:.2f}".format(arg)
    if isinstance(arg, timedelta):
        return humanize_duration(arg)
    return arg


@dataclass(frozen=True)
class TextNode:
    content: str = ""
    style: str = ""
    structured_style: StructuredStyle | None = None
    children: tuple["TextNode", ...] = ()

    def __post_init__(self):
        # literal construction may pass a list; store our own tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    # ── Builder-style operations (each returns a new node) ─────────────

    def add(self, child: "TextNode") -> "TextNode":
        return replace(self, children=self.children + (child,))

    def append(self, text: str, *styles: str) -> "TextNode":
        """Add a child with ``text`` and the given tokens joined by spaces."""
        return self.add(TextNode(content=text, style=" ".join(styles)))

    def indent(self, spaces: int) -> "TextNode":
        """Prefix every line of content; children indent two spaces deeper."""
        pad = " " * spaces
        return replace(
            self,
            content=pad + self.content.replace("\n", "\n" + pad),
            children=tuple(child.indent(spaces + 2) for child in self.children),
        )

    def printf_with_style(self, fmt: str, style: str, *args) -> "TextNode":
        """Append a ``%``-formatted child.

        Floats become two-decimal strings and timedeltas humanized strings
        before formatting, so format them with ``%s``.
        """
        content = fmt % tuple(_format_arg(a) for a in args) if args else fmt
        return self.add(TextNode(content=content, style=style))

    def printf(self, fmt: str, *args) -> "TextNode":
        return self.printf_with_style(fmt, "", *args)

    def is_empty(self) -> bool:
        if self.content:
            return False
        return all(child.is_empty() for child in self.children)

    # ── Rendering ──────────────────────────────────────────────────────

    def plain(self, background=None) -> str:
        return tailtext.rendering.render_plain(self, background)

    def ansi(self, background=None) -> str:
        return tailtext.rendering.render_ansi(self, background)

    def markdown(self, background=None) -> str:
        return tailtext.rendering.render_markdown(self, background)

    def html(self, background=None) -> str:
        return tailtext.rendering.render_html(self, background)

    def __str__(self) -> str:
        return self.plain()
