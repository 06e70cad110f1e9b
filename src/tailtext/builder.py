"""Fluent builders for styled TextNodes and utility-token strings.

TextBuilder accumulates tokens onto one node; StyleBuilder accumulates
tokens into a string for use as ``TextNode.style``. Colors starting with
``#`` become bracket tokens (``text-[#ff0000]``), anything else is taken as
a palette name (``red-600``).
"""

from tailtext.text import TextNode

SUCCESS_COLOR = "green-600"
ERROR_COLOR = "red-600"
WARNING_COLOR = "yellow-600"
INFO_COLOR = "blue-600"
MUTED_COLOR = "gray-500"


def color_token(prefix: str, color: str) -> str:
    if color.startswith("#"):
        return "{}-[{}]".format(prefix, color)
    return "{}-{}".format(prefix, color)


class StyleBuilder:
    """Accumulates utility tokens into a space-separated style string."""

    def __init__(self):
        self._tokens: list[str] = []

    def custom(self, token: str) -> "StyleBuilder":
        self._tokens.append(token)
        return self

    def bold(self) -> "StyleBuilder":
        return self.custom("font-bold")

    def italic(self) -> "StyleBuilder":
        return self.custom("italic")

    def underline(self) -> "StyleBuilder":
        return self.custom("underline")

    def strikethrough(self) -> "StyleBuilder":
        return self.custom("line-through")

    def faint(self) -> "StyleBuilder":
        return self.custom("opacity-50")

    def color(self, color: str) -> "StyleBuilder":
        return self.custom(color_token("text", color))

    def background(self, color: str) -> "StyleBuilder":
        return self.custom(color_token("bg", color))

    def success(self) -> "StyleBuilder":
        return self.color(SUCCESS_COLOR)

    def error(self) -> "StyleBuilder":
        return self.color(ERROR_COLOR)

    def warning(self) -> "StyleBuilder":
        return self.color(WARNING_COLOR)

    def info(self) -> "StyleBuilder":
        return self.color(INFO_COLOR)

    def muted(self) -> "StyleBuilder":
        return self.color(MUTED_COLOR)

    def uppercase(self) -> "StyleBuilder":
        return self.custom("uppercase")

    def lowercase(self) -> "StyleBuilder":
        return self.custom("lowercase")

    def capitalize(self) -> "StyleBuilder":
        return self.custom("capitalize")

    def build(self) -> str:
        return " ".join(self._tokens)


class TextBuilder:
    """Builds one TextNode through chained calls.

    Args:
        content: The node's own text.
    """

    def __init__(self, content: str = ""):
        self._content = content
        self._style = StyleBuilder()
        self._children: list[TextNode] = []

    def content(self, content: str) -> "TextBuilder":
        self._content = content
        return self

    def style(self, style: str) -> "TextBuilder":
        """Replace all accumulated tokens with ``style``."""
        self._style = StyleBuilder()
        for token in style.split():
            self._style.custom(token)
        return self

    def bold(self) -> "TextBuilder":
        self._style.bold()
        return self

    def italic(self) -> "TextBuilder":
        self._style.italic()
        return self

    def underline(self) -> "TextBuilder":
        self._style.underline()
        return self

    def strikethrough(self) -> "TextBuilder":
        self._style.strikethrough()
        return self

    def faint(self) -> "TextBuilder":
        self._style.faint()
        return self

    def color(self, color: str) -> "TextBuilder":
        self._style.color(color)
        return self

    def background(self, color: str) -> "TextBuilder":
        self._style.background(color)
        return self

    def success(self) -> "TextBuilder":
        return self.color(SUCCESS_COLOR)

    def error(self) -> "TextBuilder":
        return self.color(ERROR_COLOR)

    def warning(self) -> "TextBuilder":
        return self.color(WARNING_COLOR)

    def info(self) -> "TextBuilder":
        return self.color(INFO_COLOR)

    def muted(self) -> "TextBuilder":
        return self.color(MUTED_COLOR)

    def uppercase(self) -> "TextBuilder":
        self._style.uppercase()
        return self

    def lowercase(self) -> "TextBuilder":
        self._style.lowercase()
        return self

    def capitalize(self) -> "TextBuilder":
        self._style.capitalize()
        return self

    def child(self, child: TextNode) -> "TextBuilder":
        self._children.append(child)
        return self

    def child_builder(self, builder: "TextBuilder") -> "TextBuilder":
        return self.child(builder.build())

    def build(self) -> TextNode:
        return TextNode(content=self._content, style=self._style.build(), children=tuple(self._children))


def success_text(content: str) -> TextNode:
    """Green text for positive states."""
    return TextBuilder(content).success().build()


def error_text(content: str) -> TextNode:
    """Red text for error states."""
    return TextBuilder(content).error().build()


def warning_text(content: str) -> TextNode:
    return TextBuilder(content).warning().build()


def info_text(content: str) -> TextNode:
    return TextBuilder(content).info().build()


def muted_text(content: str) -> TextNode:
    """Gray text for secondary content."""
    return TextBuilder(content).muted().build()


def bold_text(content: str) -> TextNode:
    return TextBuilder(content).bold().build()


def italic_text(content: str) -> TextNode:
    return TextBuilder(content).italic().build()


_STATUS_STYLES = {
    "PASS": success_text,
    "SUCCESS": success_text,
    "OK": success_text,
    "FAIL": error_text,
    "FAILED": error_text,
    "ERROR": error_text,
    "WARN": warning_text,
    "WARNING": warning_text,
    "SKIP": muted_text,
    "SKIPPED": muted_text,
    "INFO": info_text,
}


def status_text(status: str, content: str) -> TextNode:
    """Style ``content`` by a status keyword (PASS → green, FAIL → red, ...)."""
    make = _STATUS_STYLES.get(status.upper())
    if make is None:
        return TextNode(content=content)
    return make(content)
