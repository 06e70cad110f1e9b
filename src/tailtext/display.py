"""Display facade: writes rendered text trees to a stream.

Terminals get ANSI; pipes, files and NO_COLOR environments get plain text.
The decision is Rich's (Console.is_terminal / Console.no_color) so the usual
FORCE_COLOR / NO_COLOR conventions apply.
"""

import sys

from rich.console import Console

import tailtext.rendering
from tailtext.rendering import Format


def choose_format(file) -> Format:
    """ANSI for a color-capable terminal, plain text otherwise."""
    console = Console(file=file)
    if console.is_terminal and not console.no_color:
        return Format.ANSI
    return Format.PLAIN


def write(node, file=None, fmt: Format | None = None, background=None) -> None:
    """Render ``node`` and write it to ``file`` (default stdout) as one line."""
    out = file if file is not None else sys.stdout
    chosen = fmt if fmt is not None else choose_format(out)
    out.write(tailtext.rendering.render(node, chosen, background) + "\n")
    out.flush()
